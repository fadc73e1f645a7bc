from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_active_user, require_admin
from ..database import get_db
from ..models.auth import User
from ..models.enums import StudentStatus
from ..schemas.core import (
    FacultyCreate,
    FacultyOut,
    FacultyUpdate,
    StudentCreate,
    StudentOut,
    StudentUpdate,
)
from ..services.storage import FacultyRepository, StudentRepository
from .common import delete_or_404, get_or_404, update_or_404

router = APIRouter()


# Faculty

@router.get("/faculty", response_model=list[FacultyOut])
def list_faculty(
    user_id: Optional[int] = Query(None, alias="userId"),
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return FacultyRepository(db).list(user_id=user_id)


@router.get("/faculty/{faculty_id}", response_model=FacultyOut)
def get_faculty(
    faculty_id: int,
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return get_or_404(FacultyRepository(db), faculty_id)


@router.post("/faculty", response_model=FacultyOut, status_code=status.HTTP_201_CREATED)
def create_faculty(
    payload: FacultyCreate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return FacultyRepository(db).create(payload.model_dump())


@router.put("/faculty/{faculty_id}", response_model=FacultyOut)
@router.patch("/faculty/{faculty_id}", response_model=FacultyOut)
def update_faculty(
    faculty_id: int,
    payload: FacultyUpdate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return update_or_404(FacultyRepository(db), faculty_id, payload.changes())


@router.delete("/faculty/{faculty_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_faculty(
    faculty_id: int,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    delete_or_404(FacultyRepository(db), faculty_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Students

@router.get("/students", response_model=list[StudentOut])
def list_students(
    program_id: Optional[int] = Query(None, alias="programId"),
    section_id: Optional[int] = Query(None, alias="sectionId"),
    student_status: Optional[StudentStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(
        None, description="Matches full name, enrollment no or registration no"
    ),
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return StudentRepository(db).list(
        program_id=program_id,
        section_id=section_id,
        status=student_status,
        search=search,
    )


@router.get("/students/{student_id}", response_model=StudentOut)
def get_student(
    student_id: int,
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return get_or_404(StudentRepository(db), student_id)


@router.post("/students", response_model=StudentOut, status_code=status.HTTP_201_CREATED)
def create_student(
    payload: StudentCreate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return StudentRepository(db).create(payload.model_dump())


@router.put("/students/{student_id}", response_model=StudentOut)
@router.patch("/students/{student_id}", response_model=StudentOut)
def update_student(
    student_id: int,
    payload: StudentUpdate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return update_or_404(StudentRepository(db), student_id, payload.changes())


@router.delete("/students/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(
    student_id: int,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    delete_or_404(StudentRepository(db), student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
