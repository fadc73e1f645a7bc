from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_active_user, require_accountant, require_faculty
from ..database import get_db
from ..models.auth import User
from ..models.enums import FeeStatus
from ..schemas.records import (
    AttendanceCreate,
    AttendanceOut,
    AttendanceUpdate,
    ExamCreate,
    ExamOut,
    ExamUpdate,
    FeeCreate,
    FeeOut,
    FeeStructureCreate,
    FeeStructureOut,
    FeeStructureUpdate,
    FeeUpdate,
    ResultCreate,
    ResultOut,
    ResultUpdate,
)
from ..services.storage import (
    AttendanceRepository,
    ExamRepository,
    FeeRepository,
    FeeStructureRepository,
    ResultRepository,
)
from .common import get_or_404, update_or_404

router = APIRouter()


# Attendance

@router.get("/attendance", response_model=list[AttendanceOut])
def list_attendance(
    student_id: Optional[int] = Query(None, alias="studentId"),
    faculty_id: Optional[int] = Query(None, alias="facultyId"),
    subject_id: Optional[int] = Query(None, alias="subjectId"),
    on_date: Optional[date] = Query(None, alias="date"),
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return AttendanceRepository(db).list(
        student_id=student_id, faculty_id=faculty_id, subject_id=subject_id, date=on_date
    )


@router.get("/attendance/{attendance_id}", response_model=AttendanceOut)
def get_attendance(
    attendance_id: int,
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return get_or_404(AttendanceRepository(db), attendance_id)


@router.post("/attendance", response_model=AttendanceOut, status_code=status.HTTP_201_CREATED)
def record_attendance(
    payload: AttendanceCreate,
    _: User = Depends(require_faculty),
    db: Session = Depends(get_db),
):
    return AttendanceRepository(db).create(payload.model_dump())


@router.put("/attendance/{attendance_id}", response_model=AttendanceOut)
@router.patch("/attendance/{attendance_id}", response_model=AttendanceOut)
def update_attendance(
    attendance_id: int,
    payload: AttendanceUpdate,
    _: User = Depends(require_faculty),
    db: Session = Depends(get_db),
):
    return update_or_404(AttendanceRepository(db), attendance_id, payload.changes())


# Fee structures

@router.get("/fee-structures", response_model=list[FeeStructureOut])
def list_fee_structures(
    program_id: Optional[int] = Query(None, alias="programId"),
    class_id: Optional[int] = Query(None, alias="classId"),
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return FeeStructureRepository(db).list(program_id=program_id, class_id=class_id)


@router.get("/fee-structures/{structure_id}", response_model=FeeStructureOut)
def get_fee_structure(
    structure_id: int,
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return get_or_404(FeeStructureRepository(db), structure_id)


@router.post(
    "/fee-structures", response_model=FeeStructureOut, status_code=status.HTTP_201_CREATED
)
def create_fee_structure(
    payload: FeeStructureCreate,
    _: User = Depends(require_accountant),
    db: Session = Depends(get_db),
):
    return FeeStructureRepository(db).create(payload.model_dump())


@router.put("/fee-structures/{structure_id}", response_model=FeeStructureOut)
@router.patch("/fee-structures/{structure_id}", response_model=FeeStructureOut)
def update_fee_structure(
    structure_id: int,
    payload: FeeStructureUpdate,
    _: User = Depends(require_accountant),
    db: Session = Depends(get_db),
):
    return update_or_404(FeeStructureRepository(db), structure_id, payload.changes())


# Fees (challans)

@router.get("/fees", response_model=list[FeeOut])
def list_fees(
    student_id: Optional[int] = Query(None, alias="studentId"),
    fee_status: Optional[FeeStatus] = Query(None, alias="status"),
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return FeeRepository(db).list(student_id=student_id, status=fee_status)


@router.get("/fees/{fee_id}", response_model=FeeOut)
def get_fee(
    fee_id: int,
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return get_or_404(FeeRepository(db), fee_id)


@router.post("/fees", response_model=FeeOut, status_code=status.HTTP_201_CREATED)
def create_fee(
    payload: FeeCreate,
    _: User = Depends(require_accountant),
    db: Session = Depends(get_db),
):
    return FeeRepository(db).create(payload.model_dump())


@router.put("/fees/{fee_id}", response_model=FeeOut)
@router.patch("/fees/{fee_id}", response_model=FeeOut)
def update_fee(
    fee_id: int,
    payload: FeeUpdate,
    _: User = Depends(require_accountant),
    db: Session = Depends(get_db),
):
    return update_or_404(FeeRepository(db), fee_id, payload.changes())


# Exams

@router.get("/exams", response_model=list[ExamOut])
def list_exams(
    subject_id: Optional[int] = Query(None, alias="subjectId"),
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return ExamRepository(db).list(subject_id=subject_id)


@router.get("/exams/{exam_id}", response_model=ExamOut)
def get_exam(
    exam_id: int,
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return get_or_404(ExamRepository(db), exam_id)


@router.post("/exams", response_model=ExamOut, status_code=status.HTTP_201_CREATED)
def create_exam(
    payload: ExamCreate,
    _: User = Depends(require_faculty),
    db: Session = Depends(get_db),
):
    return ExamRepository(db).create(payload.model_dump())


@router.put("/exams/{exam_id}", response_model=ExamOut)
@router.patch("/exams/{exam_id}", response_model=ExamOut)
def update_exam(
    exam_id: int,
    payload: ExamUpdate,
    _: User = Depends(require_faculty),
    db: Session = Depends(get_db),
):
    return update_or_404(ExamRepository(db), exam_id, payload.changes())


# Results

@router.get("/results", response_model=list[ResultOut])
def list_results(
    student_id: Optional[int] = Query(None, alias="studentId"),
    exam_id: Optional[int] = Query(None, alias="examId"),
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return ResultRepository(db).list(student_id=student_id, exam_id=exam_id)


@router.get("/results/{result_id}", response_model=ResultOut)
def get_result(
    result_id: int,
    _: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return get_or_404(ResultRepository(db), result_id)


@router.post("/results", response_model=ResultOut, status_code=status.HTTP_201_CREATED)
def record_result(
    payload: ResultCreate,
    _: User = Depends(require_faculty),
    db: Session = Depends(get_db),
):
    return ResultRepository(db).create(payload.model_dump())


@router.put("/results/{result_id}", response_model=ResultOut)
@router.patch("/results/{result_id}", response_model=ResultOut)
def update_result(
    result_id: int,
    payload: ResultUpdate,
    _: User = Depends(require_faculty),
    db: Session = Depends(get_db),
):
    return update_or_404(ResultRepository(db), result_id, payload.changes())
