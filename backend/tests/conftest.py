"""Pytest configuration and fixtures for Job Board tests."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment before importing app modules
os.environ["ENVIRONMENT"] = "development"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"

from jobboard.config import get_settings
from jobboard.database import Base, get_db
from jobboard.main import app
from jobboard.models import Application, ApplicationStatus, Company, Job, User, UserRole
from jobboard.services.auth import create_user_token, hash_password


# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Enable foreign key support for SQLite (required for ON DELETE CASCADE)
@event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    """Create a test client with database dependency override."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def settings():
    """The cached settings object. Change it with monkeypatch so the change is undone."""
    return get_settings()


def _make_user(db, email, full_name, role):
    user = User(
        email=email,
        password_hash=hash_password("password123"),
        full_name=full_name,
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def recruiter(db):
    """A recruiter account."""
    return _make_user(db, "recruiter@example.com", "Rita Recruiter", UserRole.RECRUITER)


@pytest.fixture
def second_recruiter(db):
    """Another recruiter, for ownership checks."""
    return _make_user(db, "other.recruiter@example.com", "Otto Other", UserRole.RECRUITER)


@pytest.fixture
def candidate(db):
    """A candidate account."""
    return _make_user(db, "candidate@example.com", "Cara Candidate", UserRole.CANDIDATE)


@pytest.fixture
def second_candidate(db):
    """Another candidate."""
    return _make_user(db, "second.candidate@example.com", "Sam Second", UserRole.CANDIDATE)


@pytest.fixture
def recruiter_headers(recruiter):
    return {"authorization": create_user_token(recruiter)}


@pytest.fixture
def second_recruiter_headers(second_recruiter):
    return {"authorization": create_user_token(second_recruiter)}


@pytest.fixture
def candidate_headers(candidate):
    return {"authorization": create_user_token(candidate)}


@pytest.fixture
def second_candidate_headers(second_candidate):
    return {"authorization": create_user_token(second_candidate)}


@pytest.fixture
def company(db):
    """A company to post jobs under."""
    company = Company(name="Acme Corp", logo="https://example.com/acme.png")
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


@pytest.fixture
def job(db, recruiter, company):
    """An open job posted by ``recruiter`` under ``company``."""
    job = Job(
        recruiter_id=recruiter.id,
        company_id=company.id,
        title="Backend Engineer",
        description="Build APIs",
        location="Remote",
        job_type="Full-Time",
        requirements="Python",
        is_open=True,
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    return job


@pytest.fixture
def closed_job(db, recruiter):
    """A job that no longer takes applications, with no company."""
    job = Job(
        recruiter_id=recruiter.id,
        title="Filled Role",
        is_open=False,
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    return job


@pytest.fixture
def application(db, candidate, job):
    """``candidate``'s application to ``job``."""
    application = Application(
        applicant_id=candidate.id,
        job_id=job.id,
        status=ApplicationStatus.APPLIED,
        education="BSc Computer Science",
        experience="3 years",
        skills="Python, SQL",
        resume="resumes/cara.pdf",
    )
    db.add(application)
    db.commit()
    db.refresh(application)
    return application


@pytest.fixture
def application_payload():
    return {
        "education": "BSc Computer Science",
        "experience": "3 years backend",
        "skills": "Python, FastAPI, SQL",
        "resume": "resumes/cara.pdf",
    }


@pytest.fixture
def hide_existing(db, monkeypatch):
    """Make the next ``db.query(model)...first()`` miss, as when a concurrent
    request inserts the row after the existence check has run."""
    misses = []

    class _MissingFirst:
        def __init__(self, query):
            self._query = query

        def filter(self, *args, **kwargs):
            return _MissingFirst(self._query.filter(*args, **kwargs))

        def first(self):
            if misses:
                misses.pop()
                return None
            return self._query.first()

    def hide(model):
        misses.append(model)
        original_query = db.query

        def racing_query(*entities, **kwargs):
            query = original_query(*entities, **kwargs)
            if entities and entities[0] is model:
                return _MissingFirst(query)
            return query

        monkeypatch.setattr(db, "query", racing_query)

    return hide
