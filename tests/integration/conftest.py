"""
Fixtures for API tests against an in-memory SQLite database.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hourbook.infrastructure.auth.jwt_handler import JWTHandler
from hourbook.infrastructure.db.database import Base, get_db
from hourbook.main import app


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def client(db_engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # No context manager: the lifespan would create tables on the configured engine
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(user_id: str) -> dict:
    token = JWTHandler().generate_test_token(user_id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice():
    return auth_headers("user-alice")


@pytest.fixture
def bob():
    return auth_headers("user-bob")
