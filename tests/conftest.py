# tests/conftest.py

import logging
import os

# Must be set before the app (and its engine) is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_STARTUP_MAX_RETRIES", "1")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from ecomm_service.db import Base, SessionLocal, engine  # noqa: E402
from ecomm_service.main import app  # noqa: E402

# Suppress noisy logs from SQLAlchemy/FastAPI during tests for cleaner output
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
logging.getLogger("fastapi").setLevel(logging.WARNING)
logging.getLogger("ecomm_service").setLevel(logging.WARNING)


@pytest.fixture(scope="function", autouse=True)
def fresh_tables():
    """Every test starts with empty tables."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session_for_test():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def product_factory(client: TestClient):
    def _create(name="Desk", price=100.0, color="black"):
        response = client.post(
            "/products", json={"name": name, "price": price, "color": color}
        )
        assert response.status_code == 201
        return response.json()

    return _create
