from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_active_user, require_admin
from ..database import get_db
from ..models.auth import User
from ..schemas.core import TimetableCreate, TimetableOut, TimetableUpdate
from ..services.storage import TimetableRepository
from .common import delete_or_404, get_or_404, update_or_404

router = APIRouter()


@router.get("/timetable", response_model=list[TimetableOut])
def list_timetable(
    section_id: Optional[int] = Query(None, alias="sectionId"),
    faculty_id: Optional[int] = Query(None, alias="facultyId"),
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return TimetableRepository(db).list(section_id=section_id, faculty_id=faculty_id)


@router.get("/timetable/{entry_id}", response_model=TimetableOut)
def get_timetable_entry(
    entry_id: int,
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return get_or_404(TimetableRepository(db), entry_id)


@router.post("/timetable", response_model=TimetableOut, status_code=status.HTTP_201_CREATED)
def create_timetable_entry(
    payload: TimetableCreate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return TimetableRepository(db).create(payload.model_dump())


@router.put("/timetable/{entry_id}", response_model=TimetableOut)
@router.patch("/timetable/{entry_id}", response_model=TimetableOut)
def update_timetable_entry(
    entry_id: int,
    payload: TimetableUpdate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return update_or_404(TimetableRepository(db), entry_id, payload.changes())


@router.delete("/timetable/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_timetable_entry(
    entry_id: int,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    delete_or_404(TimetableRepository(db), entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
