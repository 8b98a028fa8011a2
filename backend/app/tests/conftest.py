"""
Shared test configuration: in-memory SQLite and API factories.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401  (registers tables)
from app.db.base import Base
from app.db.session import get_db
from app.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test function and drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_project(client):
    def _make(name="Tower A", **extra):
        payload = {"name": name, "startDate": "2024-01-01"}
        payload.update(extra)
        response = client.post("/api/projects", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_partner(client):
    def _make(project_id, name="Partner", **extra):
        payload = {"name": name, "projectId": project_id, "sharePercentage": "50"}
        payload.update(extra)
        response = client.post("/api/partners", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_transaction(client):
    def _make(amount, transaction_type="receipt", **extra):
        payload = {
            "transactionType": transaction_type,
            "amount": str(amount),
            "date": "2024-03-01",
        }
        payload.update(extra)
        response = client.post("/api/transactions", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make
