"""Fixtures partagées : base SQLite en mémoire, repositories et client HTTP."""

import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Config
from infrastructure.database import (
    create_db_engine, create_session_factory, init_db,
    SQLAlchemyUserRepository, SQLAlchemyMessageRepository
)
from infrastructure.security.jwt_service import JWTService
from infrastructure.security.password_hasher import PasswordHasher

TEST_SECRET = "test-secret"


@pytest.fixture
def test_config() -> Config:
    return Config(
        database_url="sqlite://",
        jwt_secret_key=TEST_SECRET,
        bcrypt_work_factor=4,
    )


@pytest.fixture
def password_hasher() -> PasswordHasher:
    # Coût minimal de bcrypt pour garder des tests rapides
    return PasswordHasher(work_factor=4)


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=TEST_SECRET)


@pytest.fixture
def db_session():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def user_repository(db_session, password_hasher) -> SQLAlchemyUserRepository:
    return SQLAlchemyUserRepository(db_session, password_hasher)


@pytest.fixture
def message_repository(db_session) -> SQLAlchemyMessageRepository:
    return SQLAlchemyMessageRepository(db_session)


@pytest.fixture
def client(test_config):
    app = create_app(test_config)
    with TestClient(app) as test_client:
        yield test_client
