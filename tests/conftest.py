"""
Shared pytest fixtures and configuration
"""
import os
import tempfile
from pathlib import Path

# Point the app at throwaway storage before anything imports app.config
_TEST_ROOT = Path(tempfile.mkdtemp(prefix="catering-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_ROOT / 'test.db'}"
os.environ["UPLOAD_DIR"] = str(_TEST_ROOT / "uploads")
os.environ["BACKEND_URL"] = "http://testserver"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin123"

import shutil
import pytest
import httpx
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlmodel import SQLModel

from app.main import app
from app.config import UPLOAD_DIR
from app.database import init_db
from app.apps.authentication.dependencies import get_current_user
from app.client.api import SiteApiClient

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"
TEST_API_URL = "http://testserver/api"

# Synchronous engine on the same file, used only to reset the schema
sync_engine = create_engine(f"sqlite:///{_TEST_ROOT / 'test.db'}")


def reset_database():
    # Import all models to create tables
    from app.apps.authentication.models import User  # noqa: F401
    from app.apps.sitedata.models import SiteData  # noqa: F401
    from app.apps.contact.models import ContactSubmission  # noqa: F401

    SQLModel.metadata.drop_all(sync_engine)
    SQLModel.metadata.create_all(sync_engine)


def reset_uploads():
    shutil.rmtree(UPLOAD_DIR, ignore_errors=True)
    UPLOAD_DIR.mkdir(parents=True, exist_ok=True)


@pytest.fixture(scope="function")
def client():
    """
    Test client on a clean database. Entering the client runs the app
    lifespan, which seeds the admin user.
    """
    reset_database()
    reset_uploads()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Bearer header for the seeded administrator, obtained through /api/login"""
    response = client.post(
        "/api/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def mock_user():
    return {"userId": 1, "username": ADMIN_USERNAME}


@pytest.fixture
def authenticated_client(client, mock_user):
    """
    Create a test client with authentication mocked.
    """
    def override_get_current_user():
        return mock_user

    app.dependency_overrides[get_current_user] = override_get_current_user

    yield client

    # Cleanup
    if get_current_user in app.dependency_overrides:
        del app.dependency_overrides[get_current_user]


@pytest.fixture
async def api_client():
    """
    SiteApiClient wired to the app in-process through an ASGI transport.
    The lifespan does not run here, so tables and the admin are set up directly.
    """
    reset_database()
    reset_uploads()
    await init_db()

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
        yield SiteApiClient(TEST_API_URL, http_client=http)
