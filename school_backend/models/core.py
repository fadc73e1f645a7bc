from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from ..database import Base, utcnow
from .enums import StudentStatus, UserRole, Weekday, enum_column


class Program(Base):
    __tablename__ = "programs"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False)
    code = Column(String(50), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    classes = relationship("SchoolClass", back_populates="program", passive_deletes="all")
    students = relationship("Student", back_populates="program", passive_deletes="all")


class SchoolClass(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)
    program_id = Column(Integer, ForeignKey("programs.id"), nullable=False, index=True)
    year = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    program = relationship("Program", back_populates="classes")
    sections = relationship("Section", back_populates="school_class", passive_deletes="all")


class Section(Base):
    __tablename__ = "sections"

    id = Column(Integer, primary_key=True, index=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)
    name = Column(String(50), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    school_class = relationship("SchoolClass", back_populates="sections")
    students = relationship("Student", back_populates="section", passive_deletes="all")


class Faculty(Base):
    __tablename__ = "faculty"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, unique=True)
    cnic = Column(String(20), nullable=False)
    contact_number = Column(String(30), nullable=False)
    qualifications = Column(Text, nullable=False)
    designation = Column(String(100), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    user = relationship("User")


class Subject(Base):
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False)
    code = Column(String(50), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)


class FacultySubject(Base):
    """A faculty member teaching a subject to a section."""

    __tablename__ = "faculty_subjects"

    id = Column(Integer, primary_key=True, index=True)
    faculty_id = Column(Integer, ForeignKey("faculty.id"), nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False, index=True)
    section_id = Column(Integer, ForeignKey("sections.id"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    faculty = relationship("Faculty")
    subject = relationship("Subject")
    section = relationship("Section")


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(150), nullable=False, index=True)
    father_name = Column(String(150), nullable=False)
    cnic = Column(String(20), nullable=False)
    address = Column(Text, nullable=False)
    contact_number = Column(String(30), nullable=False)
    emergency_contact = Column(String(30), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    gender = Column(String(20), nullable=False)
    enrollment_no = Column(String(50), unique=True, nullable=False, index=True)
    registration_no = Column(String(50), unique=True, nullable=False, index=True)
    program_id = Column(Integer, ForeignKey("programs.id"), nullable=False, index=True)
    section_id = Column(Integer, ForeignKey("sections.id"), nullable=False, index=True)
    admission_date = Column(Date, nullable=False)
    status = Column(enum_column(StudentStatus), nullable=False, default=StudentStatus.ACTIVE)
    profile_image = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    program = relationship("Program", back_populates="students")
    section = relationship("Section", back_populates="students")

    def __repr__(self) -> str:
        return f"Student(id={self.id!r}, enrollment_no={self.enrollment_no!r})"


class TimetableEntry(Base):
    __tablename__ = "timetable"

    id = Column(Integer, primary_key=True, index=True)
    section_id = Column(Integer, ForeignKey("sections.id"), nullable=False, index=True)
    faculty_id = Column(Integer, ForeignKey("faculty.id"), nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False)
    day = Column(enum_column(Weekday), nullable=False)
    start_time = Column(String(20), nullable=False)
    end_time = Column(String(20), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)


class Announcement(Base):
    __tablename__ = "announcements"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    target_role = Column(enum_column(UserRole), nullable=True)
    program_id = Column(Integer, ForeignKey("programs.id"), nullable=True)
    is_pinned = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)

    author = relationship("User")
