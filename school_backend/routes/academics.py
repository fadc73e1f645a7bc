from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_active_user, require_admin
from ..database import get_db
from ..models.auth import User
from ..schemas.core import (
    ClassCreate,
    ClassOut,
    ClassUpdate,
    FacultySubjectCreate,
    FacultySubjectOut,
    FacultySubjectUpdate,
    ProgramCreate,
    ProgramOut,
    ProgramUpdate,
    SectionCreate,
    SectionOut,
    SectionUpdate,
    SubjectCreate,
    SubjectOut,
    SubjectUpdate,
)
from ..services.storage import (
    ClassRepository,
    FacultySubjectRepository,
    ProgramRepository,
    SectionRepository,
    SubjectRepository,
)
from .common import delete_or_404, get_or_404, update_or_404

router = APIRouter()


# Programs

@router.get("/programs", response_model=list[ProgramOut])
def list_programs(
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return ProgramRepository(db).list()


@router.get("/programs/{program_id}", response_model=ProgramOut)
def get_program(
    program_id: int,
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return get_or_404(ProgramRepository(db), program_id)


@router.post("/programs", response_model=ProgramOut, status_code=status.HTTP_201_CREATED)
def create_program(
    payload: ProgramCreate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return ProgramRepository(db).create(payload.model_dump())


@router.put("/programs/{program_id}", response_model=ProgramOut)
@router.patch("/programs/{program_id}", response_model=ProgramOut)
def update_program(
    program_id: int,
    payload: ProgramUpdate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return update_or_404(ProgramRepository(db), program_id, payload.changes())


@router.delete("/programs/{program_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_program(
    program_id: int,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    delete_or_404(ProgramRepository(db), program_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Classes

@router.get("/classes", response_model=list[ClassOut])
def list_classes(
    program_id: Optional[int] = Query(None, alias="programId"),
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return ClassRepository(db).list(program_id=program_id)


@router.get("/classes/{class_id}", response_model=ClassOut)
def get_class(
    class_id: int,
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return get_or_404(ClassRepository(db), class_id)


@router.post("/classes", response_model=ClassOut, status_code=status.HTTP_201_CREATED)
def create_class(
    payload: ClassCreate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return ClassRepository(db).create(payload.model_dump())


@router.put("/classes/{class_id}", response_model=ClassOut)
@router.patch("/classes/{class_id}", response_model=ClassOut)
def update_class(
    class_id: int,
    payload: ClassUpdate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return update_or_404(ClassRepository(db), class_id, payload.changes())


@router.delete("/classes/{class_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_class(
    class_id: int,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    delete_or_404(ClassRepository(db), class_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Sections

@router.get("/sections", response_model=list[SectionOut])
def list_sections(
    class_id: Optional[int] = Query(None, alias="classId"),
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return SectionRepository(db).list(class_id=class_id)


@router.get("/sections/{section_id}", response_model=SectionOut)
def get_section(
    section_id: int,
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return get_or_404(SectionRepository(db), section_id)


@router.post("/sections", response_model=SectionOut, status_code=status.HTTP_201_CREATED)
def create_section(
    payload: SectionCreate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return SectionRepository(db).create(payload.model_dump())


@router.put("/sections/{section_id}", response_model=SectionOut)
@router.patch("/sections/{section_id}", response_model=SectionOut)
def update_section(
    section_id: int,
    payload: SectionUpdate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return update_or_404(SectionRepository(db), section_id, payload.changes())


@router.delete("/sections/{section_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_section(
    section_id: int,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    delete_or_404(SectionRepository(db), section_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Subjects

@router.get("/subjects", response_model=list[SubjectOut])
def list_subjects(
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return SubjectRepository(db).list()


@router.get("/subjects/{subject_id}", response_model=SubjectOut)
def get_subject(
    subject_id: int,
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return get_or_404(SubjectRepository(db), subject_id)


@router.post("/subjects", response_model=SubjectOut, status_code=status.HTTP_201_CREATED)
def create_subject(
    payload: SubjectCreate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return SubjectRepository(db).create(payload.model_dump())


@router.put("/subjects/{subject_id}", response_model=SubjectOut)
@router.patch("/subjects/{subject_id}", response_model=SubjectOut)
def update_subject(
    subject_id: int,
    payload: SubjectUpdate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return update_or_404(SubjectRepository(db), subject_id, payload.changes())


@router.delete("/subjects/{subject_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_subject(
    subject_id: int,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    delete_or_404(SubjectRepository(db), subject_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Faculty-subject assignments

@router.get("/faculty-subjects", response_model=list[FacultySubjectOut])
def list_faculty_subjects(
    faculty_id: Optional[int] = Query(None, alias="facultyId"),
    subject_id: Optional[int] = Query(None, alias="subjectId"),
    section_id: Optional[int] = Query(None, alias="sectionId"),
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return FacultySubjectRepository(db).list(
        faculty_id=faculty_id, subject_id=subject_id, section_id=section_id
    )


@router.get("/faculty-subjects/{assignment_id}", response_model=FacultySubjectOut)
def get_faculty_subject(
    assignment_id: int,
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return get_or_404(FacultySubjectRepository(db), assignment_id)


@router.post(
    "/faculty-subjects", response_model=FacultySubjectOut, status_code=status.HTTP_201_CREATED
)
def assign_subject_to_faculty(
    payload: FacultySubjectCreate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return FacultySubjectRepository(db).create(payload.model_dump())


@router.put("/faculty-subjects/{assignment_id}", response_model=FacultySubjectOut)
@router.patch("/faculty-subjects/{assignment_id}", response_model=FacultySubjectOut)
def update_faculty_subject(
    assignment_id: int,
    payload: FacultySubjectUpdate,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return update_or_404(FacultySubjectRepository(db), assignment_id, payload.changes())


@router.delete("/faculty-subjects/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_faculty_subject(
    assignment_id: int,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    delete_or_404(FacultySubjectRepository(db), assignment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
