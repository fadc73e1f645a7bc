"""Per-entity persistence operations over an explicitly supplied SQLAlchemy session.

Every write commits on its own. Integrity errors raised by the database are
rolled back and re-raised as :class:`ConstraintViolation`; nothing else is
caught here.
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from functools import reduce
from typing import Any, Optional

from sqlalchemy import and_, delete, or_, select, true
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..database import utcnow
from ..errors import ConstraintViolation
from ..models.auth import RevokedToken, User
from ..models.core import (
    Announcement,
    Faculty,
    FacultySubject,
    Program,
    SchoolClass,
    Section,
    Student,
    Subject,
    TimetableEntry,
)
from ..models.records import Attendance, Exam, Fee, FeeStructure, Result

logger = logging.getLogger(__name__)


class Repository:
    model: Any = None
    label: str = "Record"
    # Attribute names accepted by list() as equality filters.
    filterable: tuple[str, ...] = ()

    def __init__(self, db: Session):
        self.db = db

    @property
    def ordering(self) -> tuple:
        return (self.model.id,)

    def _criteria(self, filters: dict) -> list:
        unknown = set(filters) - set(self.filterable)
        if unknown:
            raise TypeError(f"{self.label} cannot be filtered by {', '.join(sorted(unknown))}")
        return [
            getattr(self.model, name) == value
            for name, value in filters.items()
            if value is not None
        ]

    def list(self, **filters) -> list:
        criteria = reduce(and_, self._criteria(filters), true())
        stmt = select(self.model).where(criteria).order_by(*self.ordering)
        return list(self.db.scalars(stmt))

    def get(self, record_id: int) -> Optional[Any]:
        return self.db.get(self.model, record_id)

    def create(self, data: dict) -> Any:
        record = self.model(**data)
        with self._writing():
            self.db.add(record)
        self.db.refresh(record)
        logger.info("Created %s id=%s", self.label, record.id)
        return record

    def update(self, record_id: int, data: dict) -> Optional[Any]:
        record = self.get(record_id)
        if record is None:
            return None
        with self._writing():
            for key, value in data.items():
                setattr(record, key, value)
        self.db.refresh(record)
        return record

    @contextmanager
    def _writing(self):
        try:
            yield
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            reason = str(exc.orig)
            logger.warning("%s write rejected: %s", self.label, reason)
            raise ConstraintViolation(self.label, reason) from exc


class DeletableRepository(Repository):
    def delete(self, record_id: int) -> bool:
        # A single DELETE statement; referenced rows are refused by the database.
        with self._writing():
            result = self.db.execute(delete(self.model).where(self.model.id == record_id))
        removed = result.rowcount > 0
        if removed:
            logger.info("Deleted %s id=%s", self.label, record_id)
        return removed


class UserRepository(Repository):
    model = User
    label = "User"

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.scalar(select(User).where(User.username == username))

    def revoke_token(self, jti: str, expires_at: Optional[datetime] = None) -> None:
        """Record a logged-out token and drop revocations whose tokens have expired."""
        with self._writing():
            pruned = self.db.execute(
                delete(RevokedToken).where(RevokedToken.expires_at < utcnow())
            ).rowcount
            if self.db.get(RevokedToken, jti) is None:
                self.db.add(RevokedToken(jti=jti, expires_at=expires_at))
        if pruned:
            logger.info("Pruned %s expired revoked tokens", pruned)

    def is_token_revoked(self, jti: Optional[str]) -> bool:
        if jti is None:
            return False
        return self.db.get(RevokedToken, jti) is not None


class ProgramRepository(DeletableRepository):
    model = Program
    label = "Program"


class ClassRepository(DeletableRepository):
    model = SchoolClass
    label = "Class"
    filterable = ("program_id",)


class SectionRepository(DeletableRepository):
    model = Section
    label = "Section"
    filterable = ("class_id",)


class FacultyRepository(DeletableRepository):
    model = Faculty
    label = "Faculty"
    filterable = ("user_id",)


class SubjectRepository(DeletableRepository):
    model = Subject
    label = "Subject"


class FacultySubjectRepository(DeletableRepository):
    model = FacultySubject
    label = "Assignment"
    filterable = ("faculty_id", "subject_id", "section_id")


class StudentRepository(DeletableRepository):
    model = Student
    label = "Student"
    filterable = ("program_id", "section_id", "status", "search")

    def _criteria(self, filters: dict) -> list:
        filters = dict(filters)
        search = filters.pop("search", None)
        criteria = super()._criteria(filters)
        if search:
            criteria.append(
                or_(
                    Student.full_name.icontains(search, autoescape=True),
                    Student.enrollment_no.icontains(search, autoescape=True),
                    Student.registration_no.icontains(search, autoescape=True),
                )
            )
        return criteria


class AttendanceRepository(Repository):
    model = Attendance
    label = "Attendance record"
    filterable = ("student_id", "faculty_id", "subject_id", "date")


class FeeStructureRepository(Repository):
    model = FeeStructure
    label = "Fee structure"
    filterable = ("program_id", "class_id")


class FeeRepository(Repository):
    model = Fee
    label = "Fee record"
    filterable = ("student_id", "status")


class ExamRepository(Repository):
    model = Exam
    label = "Exam"
    filterable = ("subject_id",)


class ResultRepository(Repository):
    model = Result
    label = "Result"
    filterable = ("student_id", "exam_id")


class TimetableRepository(DeletableRepository):
    model = TimetableEntry
    label = "Timetable entry"
    filterable = ("section_id", "faculty_id")


class AnnouncementRepository(DeletableRepository):
    model = Announcement
    label = "Announcement"
    filterable = ("target_role", "program_id", "is_pinned")

    @property
    def ordering(self) -> tuple:
        return (Announcement.created_at.desc(), Announcement.id.desc())
