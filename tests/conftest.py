"""
Pytest configuration and shared fixtures.

The app reads its settings and DATABASE_URL at import time, so the test
environment is set up before anything from `app` is imported. Each test
gets a fresh SQLite schema built from the models.
"""

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="touchline-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ADMIN_API_KEY"] = "test-admin-key"
os.environ.pop("GOOGLE_MAPS_API_KEY", None)
os.environ.pop("MAPS_PUBLIC_TOKEN", None)

import pytest
from fastapi.testclient import TestClient

import app.models  # noqa: F401  registers every table on Base.metadata
from app.database import Base, SessionLocal, engine
from app.core.security import create_access_token
from app.models.club import Club
from app.models.user import User
from main import app as fastapi_app


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


def _make_club_user(db, club_name: str, email: str) -> User:
    club = Club(name=club_name)
    db.add(club)
    db.flush()
    user = User(email=email, full_name="Fixtures Sec", club_id=club.id, is_active=True)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def _auth_headers(user: User) -> dict:
    token = create_access_token({"id": user.id, "email": user.email, "club_id": user.club_id})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user(db) -> User:
    return _make_club_user(db, "Hove Park Juniors", "secretary@hovepark.co.uk")


@pytest.fixture
def other_user(db) -> User:
    return _make_club_user(db, "Seahaven Youth", "secretary@seahaven.co.uk")


@pytest.fixture
def auth_headers(user) -> dict:
    return _auth_headers(user)


@pytest.fixture
def other_auth_headers(other_user) -> dict:
    return _auth_headers(other_user)


@pytest.fixture
def client(db):
    with TestClient(fastapi_app) as test_client:
        yield test_client
