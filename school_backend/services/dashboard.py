from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..models.core import Faculty, Student
from ..models.enums import FeeStatus
from ..models.records import Fee

CENTS = Decimal("0.01")


def compute_stats(db: Session) -> dict:
    """Summary numbers for the dashboard, recomputed on every call."""
    total_students = db.scalar(select(func.count(Student.id)))
    total_faculty = db.scalar(select(func.count(Faculty.id)))
    collected = db.scalar(
        select(func.coalesce(func.sum(Fee.paid_amount), 0)).where(Fee.status == FeeStatus.PAID)
    )
    defaulters = db.scalar(select(func.count(Fee.id)).where(Fee.status == FeeStatus.UNPAID))
    return {
        "total_students": total_students or 0,
        "total_faculty": total_faculty or 0,
        "fee_collection": Decimal(str(collected or 0)).quantize(CENTS),
        "fee_defaulters": defaulters or 0,
    }
