# backend/tests/conftest.py
"""
Pytest configuration for the deposit API tests.

- Points the app at an in-memory SQLite database before anything from `app` is imported.
- Recreates the schema for every test.
- Replaces the mail transport with a recorder so no test leaves the process.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("MAIL_API_URL", None)
os.environ["MAIL_RETRY_BACKOFF_SECONDS"] = "0"
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient

from app.core.security import create_access_token, hash_password
from app.database import Base, SessionLocal, engine
from app.models.user import User
from app.models import deposit, notification  # noqa: F401 - register mappers
from app.services import mailer


def make_user(db, email: str, password: str = "secret-password", name: str | None = None) -> User:
    user = User(email=email, name=name, hashed_password=hash_password(password))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture(autouse=True)
def _schema():
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
def user(db) -> User:
    return make_user(db, "alice@example.com", name="Alice")


@pytest.fixture
def other_user(db) -> User:
    return make_user(db, "bob@example.com", name="Bob")


@pytest.fixture
def auth_headers(user) -> dict:
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sent_mail(monkeypatch) -> list:
    """Every (recipient, MailMessage) the app hands to the transport."""
    sent = []

    async def _record(to, message):
        sent.append((to, message))

    monkeypatch.setattr(mailer, "send_mail", _record)
    return sent


@pytest.fixture
def client(sent_mail):
    from app.main import app

    with TestClient(app) as c:
        yield c
