"""Shared fixtures: in-memory MongoDB, app client and a signed-in super-admin."""
import os

# Settings are read at import time
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-with-at-least-32-bytes!!")
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SMTP_HOST"] = ""
os.environ["ADMIN_EMAIL"] = ""
os.environ["ADMIN_PASSWORD"] = ""
os.environ["FORWARDED_ALLOW_IPS"] = "127.0.0.1"

import mongomock
import pytest
from fastapi.testclient import TestClient

from portfolio_api.core.config import settings
from portfolio_api.core.dependencies import get_upload_service
from portfolio_api.main import app
from portfolio_api.repositories.mongo_admin_repository import MongoAdminRepository
from portfolio_api.services.admin_auth_service import AdminAuthService
from portfolio_api.services.upload_service import UploadService

OWNER_EMAIL = "owner@example.com"
OWNER_PASSWORD = "secret1"


@pytest.fixture
def db():
    return mongomock.MongoClient(tz_aware=True)["portfolio_test"]


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def client(db, upload_dir):
    app.state.db = db
    app.dependency_overrides[get_upload_service] = lambda: UploadService(
        upload_dir=str(upload_dir), max_size=settings.MAX_UPLOAD_SIZE
    )
    try:
        # No context manager: the lifespan would open a real MongoClient
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_service(db):
    return AdminAuthService(admin_repository=MongoAdminRepository(db))


@pytest.fixture
def super_admin(admin_service):
    return admin_service.bootstrap_default(OWNER_EMAIL, OWNER_PASSWORD)


def login(client, email, password):
    return client.post("/auth/login", json={"email": email, "password": password})


@pytest.fixture
def auth_headers(client, super_admin):
    r = login(client, OWNER_EMAIL, OWNER_PASSWORD)
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.json()['token']}"}
