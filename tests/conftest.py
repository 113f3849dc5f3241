import os
import uuid

# Configure the app for tests before anything imports the settings.
os.environ.setdefault("SQLITE_DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("RESEND_API_KEY", "")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from portfolio.core.db import enable_sqlite_pragmas, get_db
from portfolio.core.object_storage import get_object_storage
from portfolio.core.security import create_access_token, get_password_hash
from portfolio.main import app
from portfolio.models import Base, User
from portfolio.services.email_service import get_email_service
from portfolio.utils.exceptions import UpstreamError

API = "/api"


class FakeStorage:
    """Records calls instead of talking to a bucket."""

    def __init__(self):
        self.deleted_keys = []
        self.presigned_keys = []
        self.fail_deletes = False
        self.on_delete = None

    def generate_presigned_put_url(self, key, expires_in):
        self.presigned_keys.append(key)
        return f"https://storage.test/upload/{key}?X-Amz-Expires={expires_in}"

    def public_url(self, key):
        return f"https://cdn.test/{key}"

    def delete_object(self, key):
        if self.fail_deletes:
            raise UpstreamError("Failed to delete file from storage")
        if self.on_delete is not None:
            self.on_delete(key)
        self.deleted_keys.append(key)


class FakeEmailService:
    def __init__(self):
        self.sent = []

    def send(self, subject, html, reply_to=None):
        self.sent.append({"subject": subject, "html": html, "reply_to": reply_to})


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_pragmas(engine, wal=False)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def mailer():
    return FakeEmailService()


@pytest.fixture
def client(session_factory, storage, mailer):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_object_storage] = lambda: storage
    app.dependency_overrides[get_email_service] = lambda: mailer
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_user(db):
    user = User(
        email="admin@example.com",
        hashed_password=get_password_hash("correct-horse"),
        display_name="Admin User",
        role="admin",
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin_headers(admin_user):
    return {"Authorization": f"Bearer {create_access_token(admin_user)}"}


@pytest.fixture
def make_category(client, admin_headers):
    def _make(name="Landscapes", **extra):
        response = client.post(f"{API}/admin/categories", json={"name": name, **extra}, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_file(client, admin_headers):
    counter = {"n": 0}

    def _make(category_id=None, **extra):
        counter["n"] += 1
        key = extra.pop("key", f"object-{counter['n']}.jpg")
        body = {
            "name": extra.pop("name", f"Photo {counter['n']}"),
            "url": f"https://cdn.test/{key}",
            "key": key,
            "size": 2048,
            "mimeType": "image/jpeg",
            "categoryId": category_id,
            **extra,
        }
        response = client.post(f"{API}/admin/files", json=body, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def set_created_at(session_factory):
    """Rewrites a row's created_at so list ordering can be checked exactly."""
    def _set(model, row_id, when):
        session = session_factory()
        try:
            session.query(model).filter(model.id == uuid.UUID(row_id)).update({"created_at": when})
            session.commit()
        finally:
            session.close()
    return _set
