"""
Shared fixtures for the test suite.

Every test gets its own SQLite database file under pytest's ``tmp_path``
and a low bcrypt work factor so hashing stays fast.
"""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from skillsphere.core.config import Settings
from skillsphere.core.database import create_db_engine, create_session_factory, init_db
from skillsphere.core.security import PasswordHasher, TokenIssuer
from skillsphere.main import create_app

TEST_SECRET = "test-secret-key"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        SECRET_KEY=TEST_SECRET,
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        BCRYPT_ROUNDS=4,
        BACKEND_CORS_ORIGINS=["https://skillsphere25.netlify.app"],
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def engine(settings: Settings):
    engine_ = create_db_engine(settings)
    init_db(engine_)
    yield engine_
    engine_.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def db_session(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_issuer() -> TokenIssuer:
    return TokenIssuer(secret_key=TEST_SECRET, expire_minutes=60)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Test client; entering it runs the lifespan, which creates the tables.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register(client: TestClient):
    """Register a user through the API and return the response."""

    def _register(username="alice", email="a@x.com", password="secret123"):
        return client.post(
            "/api/register",
            json={"username": username, "email": email, "password": password},
        )

    return _register
