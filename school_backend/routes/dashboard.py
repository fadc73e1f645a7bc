from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_active_user
from ..database import get_db
from ..models.auth import User
from ..schemas.core import DashboardStats
from ..services.dashboard import compute_stats

router = APIRouter()


@router.get("/dashboard/stats", response_model=DashboardStats)
def dashboard_stats(
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return compute_stats(db)
