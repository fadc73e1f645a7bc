from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_active_user, require_admin
from ..database import get_db
from ..models.auth import User
from ..models.enums import UserRole
from ..schemas.core import AnnouncementCreate, AnnouncementOut, AnnouncementUpdate
from ..services.storage import AnnouncementRepository
from .common import delete_or_404, get_or_404, update_or_404

router = APIRouter()


@router.get("/announcements", response_model=list[AnnouncementOut])
def list_announcements(
    target_role: Optional[UserRole] = Query(None, alias="targetRole"),
    program_id: Optional[int] = Query(None, alias="programId"),
    is_pinned: Optional[bool] = Query(None, alias="isPinned"),
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    """Newest first."""
    return AnnouncementRepository(db).list(
        target_role=target_role, program_id=program_id, is_pinned=is_pinned
    )


@router.get("/announcements/{announcement_id}", response_model=AnnouncementOut)
def get_announcement(
    announcement_id: int,
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return get_or_404(AnnouncementRepository(db), announcement_id)


@router.post(
    "/announcements", response_model=AnnouncementOut, status_code=status.HTTP_201_CREATED
)
def create_announcement(
    payload: AnnouncementCreate,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    data = payload.model_dump()
    if data["user_id"] is None:
        data["user_id"] = current_user.id
    return AnnouncementRepository(db).create(data)


@router.put("/announcements/{announcement_id}", response_model=AnnouncementOut)
@router.patch("/announcements/{announcement_id}", response_model=AnnouncementOut)
def update_announcement(
    announcement_id: int,
    payload: AnnouncementUpdate,
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return update_or_404(AnnouncementRepository(db), announcement_id, payload.changes())


@router.delete("/announcements/{announcement_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_announcement(
    announcement_id: int,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    delete_or_404(AnnouncementRepository(db), announcement_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
