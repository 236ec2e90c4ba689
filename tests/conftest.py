from __future__ import annotations

import os

# Must be in place before talkboard.config builds its Settings
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient

from talkboard import models
from talkboard.auth import PasswordVerifier
from talkboard.database import Base, SessionLocal, engine
from talkboard.main import create_app
from talkboard.sessions import SessionManager


@pytest.fixture(autouse=True)
def fresh_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def verifier():
    return PasswordVerifier(rounds=4)


@pytest.fixture
def sessions():
    return SessionManager(ttl_seconds=60)


@pytest.fixture
def make_user(db, verifier):
    def _make(username: str, password: str) -> models.User:
        user = models.User(username=username, hashed_password=verifier.hash(password))
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)
