# tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.core.db import Base, enable_sqlite_foreign_keys, get_db
from main import app

# --- API Test Database Setup ---
SQLALCHEMY_DATABASE_URL = "sqlite:///./test_api.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ADMIN_PASSWORD = "correct-horse"


@pytest.fixture
def api_db():
    """Fresh schema for each API test"""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(api_db, monkeypatch):
    """
    Provides a TestClient whose requests use the test database and a known
    admin password. No session marker is set.
    """
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", ADMIN_PASSWORD)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    """TestClient carrying the admin session marker"""
    client.cookies.set(settings.AUTH_COOKIE_NAME, "true")
    return client
