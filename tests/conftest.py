import itertools
import os

os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from school_backend.config import DEFAULT_ADMIN_PASSWORD, DEFAULT_ADMIN_USERNAME
from school_backend.database import Base, create_db_engine, create_session_factory
from school_backend.main import create_app


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    """A bare session for exercising the repositories without HTTP."""
    Base.metadata.create_all(engine)
    session = create_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def client(engine):
    app = create_app(engine)
    with TestClient(app) as test_client:
        yield test_client


def login(client, username, password):
    response = client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


@pytest.fixture
def admin_headers(client):
    return login(client, DEFAULT_ADMIN_USERNAME, DEFAULT_ADMIN_PASSWORD)


@pytest.fixture
def make_user(client, admin_headers):
    """Register a user with the given role and return auth headers for it."""

    def _make(username, role, password="s3cret-pass"):
        response = client.post(
            "/api/register",
            json={
                "username": username,
                "password": password,
                "fullName": username.title(),
                "email": f"{username}@example.com",
                "role": role,
            },
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        return login(client, username, password)

    return _make


@pytest.fixture
def faculty_headers(make_user):
    return make_user("farah", "faculty")


@pytest.fixture
def accountant_headers(make_user):
    return make_user("imran", "accountant")


def _post(client, headers, path, payload):
    response = client.post(path, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def school(client, admin_headers):
    """One program with a first-year class, section A, a subject and a lecturer."""
    program = _post(client, admin_headers, "/api/programs", {"name": "Computer Science", "code": "CS"})
    school_class = _post(client, admin_headers, "/api/classes", {"programId": program["id"], "year": 1})
    section = _post(client, admin_headers, "/api/sections", {"classId": school_class["id"], "name": "A"})
    subject = _post(client, admin_headers, "/api/subjects", {"name": "Mathematics", "code": "MATH-101"})
    faculty = _post(
        client,
        admin_headers,
        "/api/faculty",
        {
            "cnic": "35202-1234567-1",
            "contactNumber": "0300-1234567",
            "qualifications": "MSc Mathematics",
            "designation": "Lecturer",
        },
    )
    return {
        "program": program,
        "class": school_class,
        "section": section,
        "subject": subject,
        "faculty": faculty,
    }


@pytest.fixture
def student_payload(school):
    counter = itertools.count(1)

    def _payload(**overrides):
        n = next(counter)
        payload = {
            "fullName": f"Student {n}",
            "fatherName": "Father Name",
            "cnic": f"35202-000000{n}-1",
            "address": "12 Mall Road, Lahore",
            "contactNumber": "0300-0000000",
            "emergencyContact": "0300-1111111",
            "dateOfBirth": "2005-04-12",
            "gender": "male",
            "enrollmentNo": f"E-2024-{n:02d}",
            "registrationNo": f"R-{n:04d}",
            "programId": school["program"]["id"],
            "sectionId": school["section"]["id"],
            "admissionDate": "2024-09-01",
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture
def make_student(client, admin_headers, student_payload):
    def _make(**overrides):
        return _post(client, admin_headers, "/api/students", student_payload(**overrides))

    return _make
