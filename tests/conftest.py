import asyncio

import pytest
from fastapi.testclient import TestClient

import shared.db as db_module
from shared.auth import get_password_hash
from shared.db import get_session_factory, init_models
from services.user_management.models.users import User, UserRole, UserStatus

ADMIN = {"email": "admin@shacademy.com", "password": "admin-pass"}
STUDENT = {"email": "student@shacademy.com", "password": "student-pass"}
OTHER_STUDENT = {"email": "other@shacademy.com", "password": "other-pass"}


async def _seed_users():
    await init_models()
    async with get_session_factory()() as session:
        for name, creds, role in (
            ("Admin", ADMIN, UserRole.ADMIN),
            ("Sara Student", STUDENT, UserRole.STUDENT),
            ("Omar Other", OTHER_STUDENT, UserRole.STUDENT),
        ):
            session.add(User(
                name=name,
                email=creds["email"],
                hashed_password=get_password_hash(creds["password"]),
                role=role,
                status=UserStatus.ACTIVE,
            ))
        await session.commit()


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setattr(db_module, "_engine", None)
    monkeypatch.setattr(db_module, "_session_factory", None)
    asyncio.run(_seed_users())

    from main import app
    with TestClient(app) as test_client:
        yield test_client

    monkeypatch.setattr(db_module, "_engine", None)
    monkeypatch.setattr(db_module, "_session_factory", None)


def login(client, creds):
    response = client.post("/auth/login", json=creds)
    assert response.status_code == 200, response.text
    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def admin_headers(client):
    return login(client, ADMIN)


@pytest.fixture
def student_headers(client):
    return login(client, STUDENT)


@pytest.fixture
def other_student_headers(client):
    return login(client, OTHER_STUDENT)


@pytest.fixture
def sent_mail(monkeypatch):
    """Capture outgoing mail instead of talking to an SMTP server."""
    outbox = []

    async def fake_send_email(subject, recipients, body):
        outbox.append({"subject": subject, "recipients": recipients, "body": body})

    monkeypatch.setattr("shared.mail.send_email", fake_send_email)
    return outbox
