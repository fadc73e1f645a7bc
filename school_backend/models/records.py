"""Records kept for history: attendance, fees, exams and results have no delete."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from ..database import Base, utcnow
from .enums import AttendanceStatus, FeeFrequency, FeeStatus, enum_column


class Attendance(Base):
    __tablename__ = "attendance"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    faculty_id = Column(Integer, ForeignKey("faculty.id"), nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=True, index=True)
    date = Column(Date, nullable=False, index=True)
    status = Column(enum_column(AttendanceStatus), nullable=False)
    remarks = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    student = relationship("Student")


class FeeStructure(Base):
    __tablename__ = "fee_structures"

    id = Column(Integer, primary_key=True, index=True)
    program_id = Column(Integer, ForeignKey("programs.id"), nullable=False, index=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    frequency = Column(enum_column(FeeFrequency), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    fees = relationship("Fee", back_populates="fee_structure", passive_deletes="all")


class Fee(Base):
    """A challan issued to a student against a fee structure."""

    __tablename__ = "fees"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    fee_structure_id = Column(Integer, ForeignKey("fee_structures.id"), nullable=False)
    challan_id = Column(String(50), unique=True, nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    due_date = Column(Date, nullable=False)
    paid_amount = Column(Numeric(12, 2), nullable=False, default=0)
    status = Column(enum_column(FeeStatus), nullable=False, index=True)
    payment_date = Column(Date, nullable=True)
    discount = Column(Numeric(12, 2), nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    student = relationship("Student")
    fee_structure = relationship("FeeStructure", back_populates="fees")


class Exam(Base):
    __tablename__ = "exams"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False, index=True)
    total_marks = Column(Integer, nullable=False)
    exam_date = Column(Date, nullable=False)
    academic_term = Column(String(50), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    subject = relationship("Subject")
    results = relationship("Result", back_populates="exam", passive_deletes="all")


class Result(Base):
    __tablename__ = "results"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    exam_id = Column(Integer, ForeignKey("exams.id"), nullable=False, index=True)
    marks_obtained = Column(Numeric(8, 2), nullable=False)
    percentage = Column(Numeric(5, 2), nullable=False)
    grade = Column(String(10), nullable=False)
    remarks = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    student = relationship("Student")
    exam = relationship("Exam", back_populates="results")
