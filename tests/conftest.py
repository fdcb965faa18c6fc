import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from datetime import datetime, timezone
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

import main
from app.core.config import settings
from app.core.database import Base
from app.core.security import get_password_hash
from app.crud.file import lesson_file as crud_file
from app.crud.lesson import lesson as crud_lesson
from app.crud.message import message as crud_message
from app.crud.review import review as crud_review
from app.crud.user import user as crud_user
from app.crud.video import video as crud_video
from app.utils import deps as deps_utils

test_db_url = settings.TEST_DATABASE_URL or "sqlite://"

TUTOR_EMAIL = "tutor@example.com"
TUTOR_PASSWORD = "testpass123"

@pytest.fixture(scope="session")
def database_engine():
    if test_db_url.startswith("sqlite"):
        engine = create_engine(test_db_url, connect_args={"check_same_thread": False}, poolclass=StaticPool)
    else:
        engine = create_engine(test_db_url)
    yield engine
    engine.dispose()

@pytest.fixture(scope="function")
def db_session(database_engine):
    Base.metadata.create_all(bind=database_engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=database_engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()
        Base.metadata.drop_all(bind=database_engine)

@pytest.fixture(scope="function")
def client(db_session):
    main.app.dependency_overrides[deps_utils.get_db] = lambda: db_session
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()

@pytest.fixture
def tutor(db_session):
    return crud_user.create(db_session, obj_in={
        "name": "Test Tutor",
        "email": TUTOR_EMAIL,
        "password_hash": get_password_hash(TUTOR_PASSWORD),
        "subject": "Mathematics"
    })

@pytest.fixture
def tutor_token(client, tutor):
    response = client.post("/api/auth/login", json={"email": TUTOR_EMAIL, "password": TUTOR_PASSWORD})
    token = response.json().get("token")
    assert token, f"Login failed or token missing: {response.json()}"
    return token

@pytest.fixture
def auth_headers(tutor_token):
    return {"Authorization": f"Bearer {tutor_token}"}

@pytest.fixture
def lesson_factory(db_session):
    def _lesson_factory(title="Algebra I", level="beginner", **fields):
        return crud_lesson.create(db_session, obj_in={"title": title, "level": level, **fields})
    return _lesson_factory

@pytest.fixture
def video_factory(db_session):
    """Insert a video directly; lesson counters are left for the caller to recount."""
    def _video_factory(lesson_id, title="Intro", url="https://videos.example.com/intro", **fields):
        return crud_video.create(db_session, obj_in={"lesson_id": lesson_id, "title": title, "url": url, **fields})
    return _video_factory

@pytest.fixture
def file_factory(db_session):
    def _file_factory(lesson_id, name="worksheet.pdf", url="https://files.example.com/worksheet.pdf", **fields):
        return crud_file.create(db_session, obj_in={"lesson_id": lesson_id, "name": name, "url": url, **fields})
    return _file_factory

@pytest.fixture
def review_factory(db_session):
    def _review_factory(student_name="Sara", rating=5, comment="Great teacher", **fields):
        return crud_review.create(
            db_session, obj_in={"student_name": student_name, "rating": rating, "comment": comment, **fields}
        )
    return _review_factory

@pytest.fixture
def message_factory(db_session):
    def _message_factory(student_name="Omar", content="When is the next class?", **fields):
        return crud_message.create(db_session, obj_in={"student_name": student_name, "content": content, **fields})
    return _message_factory

@pytest.fixture
def now():
    return datetime.now(timezone.utc)
