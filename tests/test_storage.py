from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from school_backend.errors import ConstraintViolation
from school_backend.models.enums import StudentStatus
from school_backend.services.dashboard import compute_stats
from school_backend.services.storage import (
    ClassRepository,
    ProgramRepository,
    SectionRepository,
    StudentRepository,
    UserRepository,
)


@pytest.fixture
def section(db):
    program = ProgramRepository(db).create({"name": "Mathematics", "code": "MTH"})
    school_class = ClassRepository(db).create({"program_id": program.id, "year": 2})
    return SectionRepository(db).create({"class_id": school_class.id, "name": "Blue"})


def _student(section, n, **overrides):
    data = {
        "full_name": f"Pupil {n}",
        "father_name": "Father",
        "cnic": f"cnic-{n}",
        "address": "Street 1",
        "contact_number": "0300",
        "emergency_contact": "0301",
        "date_of_birth": date(2006, 1, n),
        "gender": "female",
        "enrollment_no": f"EN-{n}",
        "registration_no": f"RG-{n}",
        "program_id": section.school_class.program_id,
        "section_id": section.id,
        "admission_date": date(2024, 9, 1),
    }
    data.update(overrides)
    return data


def test_list_without_filters_returns_everything_in_id_order(db):
    programs = ProgramRepository(db)
    created = [programs.create({"name": f"P{n}", "code": f"P{n}"}) for n in range(3)]

    assert [p.id for p in programs.list()] == [p.id for p in created]


def test_none_filters_are_ignored(db, section):
    students = StudentRepository(db)
    first = students.create(_student(section, 1))
    second = students.create(_student(section, 2, status=StudentStatus.PENDING))

    assert students.list(program_id=None, status=None) == [first, second]
    assert students.list(status=StudentStatus.PENDING, section_id=section.id) == [second]
    assert students.list(status=StudentStatus.PENDING, section_id=section.id + 1) == []


def test_unknown_filter_is_a_programming_error(db):
    with pytest.raises(TypeError):
        ClassRepository(db).list(colour="red")


def test_missing_records(db):
    programs = ProgramRepository(db)

    assert programs.get(123) is None
    assert programs.update(123, {"name": "Nope"}) is None
    assert programs.delete(123) is False


def test_integrity_errors_become_constraint_violations(db):
    programs = ProgramRepository(db)
    programs.create({"name": "Art", "code": "ART"})

    with pytest.raises(ConstraintViolation) as excinfo:
        programs.create({"name": "Art again", "code": "ART"})

    assert excinfo.value.message.startswith("Program violates a data constraint")
    # The session is usable again after the rollback.
    assert [p.code for p in programs.list()] == ["ART"]


def test_delete_is_refused_while_referenced(db, section):
    with pytest.raises(ConstraintViolation):
        ClassRepository(db).delete(section.class_id)

    assert SectionRepository(db).delete(section.id) is True
    assert ClassRepository(db).delete(section.class_id) is True


def test_student_search_is_an_or_across_identifiers(db, section):
    students = StudentRepository(db)
    by_name = students.create(_student(section, 1, full_name="Hamza Ali"))
    by_number = students.create(_student(section, 2, registration_no="ALI-77"))
    students.create(_student(section, 3))

    assert students.list(search="ali") == [by_name, by_number]
    assert students.list(search="") == students.list()


def test_revoked_tokens(db):
    users = UserRepository(db)

    assert users.is_token_revoked("abc") is False
    assert users.is_token_revoked(None) is False
    users.revoke_token("abc")
    users.revoke_token("abc")
    assert users.is_token_revoked("abc") is True


def test_revoking_prunes_expired_tokens(db):
    users = UserRepository(db)
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    users.revoke_token("stale", now - timedelta(minutes=5))
    assert users.is_token_revoked("stale") is True

    users.revoke_token("fresh", now + timedelta(hours=1))

    assert users.is_token_revoked("stale") is False
    assert users.is_token_revoked("fresh") is True


def test_compute_stats_on_empty_database(db):
    assert compute_stats(db) == {
        "total_students": 0,
        "total_faculty": 0,
        "fee_collection": Decimal("0.00"),
        "fee_defaulters": 0,
    }
