import os
import tempfile
from pathlib import Path

from passlib.context import CryptContext

_TMP_DIR = Path(tempfile.mkdtemp(prefix="portfolio-cms-tests-"))

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "s3cret-password"

# Settings are read at import time, so the environment is prepared first
os.environ["DATABASE__URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"
os.environ["LOG__DIR"] = str(_TMP_DIR / "logs")
os.environ["STORAGE__ROOT"] = str(_TMP_DIR / "uploads")
os.environ["STORAGE__PUBLIC_BASE_URL"] = "/uploads"
os.environ["CACHE__ENABLED"] = "false"
os.environ["HEALTH__CHECK_REDIS"] = "false"
os.environ["LOGFIRE__ENABLED"] = "false"
os.environ["AUTH__ADMIN_EMAIL"] = ADMIN_EMAIL
os.environ["AUTH__ADMIN_PASSWORD_HASH"] = CryptContext(schemes=["bcrypt"]).hash(
    ADMIN_PASSWORD
)
os.environ["AUTH__SECRET_KEY"] = "test-secret-key"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from portfolio_cms.stores.database import Base, create_tables, engine  # noqa: E402

create_tables()


@pytest.fixture(autouse=True)
def clean_database():
    yield
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture(scope="session")
def app():
    from portfolio_cms.api.factory import create_api

    return create_api()


@pytest.fixture
def admin_credentials():
    return {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def admin_client(app, admin_credentials):
    client = TestClient(app)
    response = client.post("/api/v1/auth/login", json=admin_credentials)
    assert response.status_code == 200
    return client
