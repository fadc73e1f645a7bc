import datetime as dt
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import Field, StrictInt

from ..models.enums import AttendanceStatus, FeeFrequency, FeeStatus
from .base import Money, RecordId, SchemaModel, Text

Marks = Annotated[Decimal, Field(ge=0, max_digits=8, decimal_places=2)]
Percentage = Annotated[Decimal, Field(ge=0, le=100, max_digits=5, decimal_places=2)]
TotalMarks = Annotated[StrictInt, Field(gt=0)]


class AttendanceBase(SchemaModel):
    student_id: RecordId
    faculty_id: RecordId
    subject_id: Optional[RecordId] = None
    date: dt.date
    status: AttendanceStatus
    remarks: Optional[str] = None


class AttendanceCreate(AttendanceBase):
    pass


class AttendanceUpdate(SchemaModel):
    student_id: RecordId = None
    faculty_id: RecordId = None
    subject_id: Optional[RecordId] = None
    date: dt.date = None
    status: AttendanceStatus = None
    remarks: Optional[str] = None


class AttendanceOut(AttendanceBase):
    id: int
    created_at: dt.datetime


class FeeStructureBase(SchemaModel):
    program_id: RecordId
    class_id: RecordId
    amount: Money
    frequency: FeeFrequency
    description: Optional[str] = None


class FeeStructureCreate(FeeStructureBase):
    pass


class FeeStructureUpdate(SchemaModel):
    program_id: RecordId = None
    class_id: RecordId = None
    amount: Money = None
    frequency: FeeFrequency = None
    description: Optional[str] = None


class FeeStructureOut(FeeStructureBase):
    id: int
    created_at: dt.datetime


class FeeBase(SchemaModel):
    student_id: RecordId
    fee_structure_id: RecordId
    challan_id: Text
    amount: Money
    due_date: dt.date
    paid_amount: Money = Decimal("0")
    status: FeeStatus
    payment_date: Optional[dt.date] = None
    discount: Money = Decimal("0")


class FeeCreate(FeeBase):
    pass


class FeeUpdate(SchemaModel):
    student_id: RecordId = None
    fee_structure_id: RecordId = None
    challan_id: Text = None
    amount: Money = None
    due_date: dt.date = None
    paid_amount: Money = None
    status: FeeStatus = None
    payment_date: Optional[dt.date] = None
    discount: Money = None


class FeeOut(FeeBase):
    id: int
    created_at: dt.datetime


class ExamBase(SchemaModel):
    name: Text
    subject_id: RecordId
    total_marks: TotalMarks
    exam_date: dt.date
    academic_term: Text


class ExamCreate(ExamBase):
    pass


class ExamUpdate(SchemaModel):
    name: Text = None
    subject_id: RecordId = None
    total_marks: TotalMarks = None
    exam_date: dt.date = None
    academic_term: Text = None


class ExamOut(ExamBase):
    id: int
    created_at: dt.datetime


class ResultBase(SchemaModel):
    student_id: RecordId
    exam_id: RecordId
    marks_obtained: Marks
    percentage: Percentage
    grade: Text
    remarks: Optional[str] = None


class ResultCreate(ResultBase):
    pass


class ResultUpdate(SchemaModel):
    student_id: RecordId = None
    exam_id: RecordId = None
    marks_obtained: Marks = None
    percentage: Percentage = None
    grade: Text = None
    remarks: Optional[str] = None


class ResultOut(ResultBase):
    id: int
    created_at: dt.datetime
