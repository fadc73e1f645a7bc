from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import StrictBool

from ..models.enums import StudentStatus, UserRole, Weekday
from .base import FormInt, RecordId, SchemaModel, Text


class ProgramBase(SchemaModel):
    name: Text
    code: Text
    description: Optional[str] = None


class ProgramCreate(ProgramBase):
    pass


class ProgramUpdate(SchemaModel):
    name: Text = None
    code: Text = None
    description: Optional[str] = None


class ProgramOut(ProgramBase):
    id: int
    created_at: datetime


class ClassBase(SchemaModel):
    program_id: RecordId
    year: FormInt


class ClassCreate(ClassBase):
    pass


class ClassUpdate(SchemaModel):
    program_id: RecordId = None
    year: FormInt = None


class ClassOut(ClassBase):
    id: int
    created_at: datetime


class SectionBase(SchemaModel):
    class_id: RecordId
    name: Text


class SectionCreate(SectionBase):
    pass


class SectionUpdate(SchemaModel):
    class_id: RecordId = None
    name: Text = None


class SectionOut(SectionBase):
    id: int
    created_at: datetime


class FacultyBase(SchemaModel):
    user_id: Optional[RecordId] = None
    cnic: Text
    contact_number: Text
    qualifications: Text
    designation: Text


class FacultyCreate(FacultyBase):
    pass


class FacultyUpdate(SchemaModel):
    user_id: Optional[RecordId] = None
    cnic: Text = None
    contact_number: Text = None
    qualifications: Text = None
    designation: Text = None


class FacultyOut(FacultyBase):
    id: int
    created_at: datetime


class SubjectBase(SchemaModel):
    name: Text
    code: Text
    description: Optional[str] = None


class SubjectCreate(SubjectBase):
    pass


class SubjectUpdate(SchemaModel):
    name: Text = None
    code: Text = None
    description: Optional[str] = None


class SubjectOut(SubjectBase):
    id: int
    created_at: datetime


class FacultySubjectBase(SchemaModel):
    faculty_id: RecordId
    subject_id: RecordId
    section_id: RecordId


class FacultySubjectCreate(FacultySubjectBase):
    pass


class FacultySubjectUpdate(SchemaModel):
    faculty_id: RecordId = None
    subject_id: RecordId = None
    section_id: RecordId = None


class FacultySubjectOut(FacultySubjectBase):
    id: int
    created_at: datetime


class StudentBase(SchemaModel):
    full_name: Text
    father_name: Text
    cnic: Text
    address: Text
    contact_number: Text
    emergency_contact: Text
    date_of_birth: date
    gender: Text
    enrollment_no: Text
    registration_no: Text
    program_id: RecordId
    section_id: RecordId
    admission_date: date
    status: StudentStatus = StudentStatus.ACTIVE
    profile_image: Optional[str] = None


class StudentCreate(StudentBase):
    pass


class StudentUpdate(SchemaModel):
    full_name: Text = None
    father_name: Text = None
    cnic: Text = None
    address: Text = None
    contact_number: Text = None
    emergency_contact: Text = None
    date_of_birth: date = None
    gender: Text = None
    enrollment_no: Text = None
    registration_no: Text = None
    program_id: RecordId = None
    section_id: RecordId = None
    admission_date: date = None
    status: StudentStatus = None
    profile_image: Optional[str] = None


class StudentOut(StudentBase):
    id: int
    created_at: datetime


class TimetableBase(SchemaModel):
    section_id: RecordId
    faculty_id: RecordId
    subject_id: RecordId
    day: Weekday
    start_time: Text
    end_time: Text


class TimetableCreate(TimetableBase):
    pass


class TimetableUpdate(SchemaModel):
    section_id: RecordId = None
    faculty_id: RecordId = None
    subject_id: RecordId = None
    day: Weekday = None
    start_time: Text = None
    end_time: Text = None


class TimetableOut(TimetableBase):
    id: int
    created_at: datetime


class AnnouncementBase(SchemaModel):
    title: Text
    content: Text
    target_role: Optional[UserRole] = None
    program_id: Optional[RecordId] = None
    is_pinned: StrictBool = False


class AnnouncementCreate(AnnouncementBase):
    # Filled with the caller's id when omitted.
    user_id: Optional[RecordId] = None


class AnnouncementUpdate(SchemaModel):
    title: Text = None
    content: Text = None
    target_role: Optional[UserRole] = None
    program_id: Optional[RecordId] = None
    is_pinned: StrictBool = None


class AnnouncementOut(AnnouncementBase):
    id: int
    user_id: int
    created_at: datetime


class DashboardStats(SchemaModel):
    total_students: int
    total_faculty: int
    fee_collection: Decimal
    fee_defaulters: int
