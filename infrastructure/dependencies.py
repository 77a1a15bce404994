"""
Dépendances FastAPI pour l'injection de services

La configuration et la session factory sont créées au démarrage
(create_app) et lues depuis request.app.state.
"""

from typing import Generator
from sqlalchemy.orm import Session
from fastapi import Depends, Request

from config import Config
from infrastructure.database.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyMessageRepository
)
from infrastructure.security.password_hasher import PasswordHasher
from infrastructure.security.jwt_service import JWTService
from application.services.auth_service import AuthService
from application.services.message_service import MessageService
from application.services.user_service import UserService


def get_config(request: Request) -> Config:
    """Dépendance pour obtenir la configuration de l'application"""
    return request.app.state.config


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dépendance pour obtenir une session de base de données"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_password_hasher(config: Config = Depends(get_config)) -> PasswordHasher:
    """Dépendance pour obtenir le PasswordHasher"""
    return PasswordHasher(work_factor=config.bcrypt_work_factor)


def get_jwt_service(config: Config = Depends(get_config)) -> JWTService:
    """Dépendance pour obtenir le JWTService"""
    return JWTService(
        secret_key=config.jwt_secret_key,
        algorithm=config.jwt_algorithm,
        expire_minutes=config.jwt_expire_minutes
    )


def get_user_repository(
    db: Session = Depends(get_db),
    password_hasher: PasswordHasher = Depends(get_password_hasher)
) -> SQLAlchemyUserRepository:
    """Dépendance pour obtenir le UserRepository"""
    return SQLAlchemyUserRepository(db, password_hasher)


def get_message_repository(db: Session = Depends(get_db)) -> SQLAlchemyMessageRepository:
    """Dépendance pour obtenir le MessageRepository"""
    return SQLAlchemyMessageRepository(db)


def get_auth_service(
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository),
    jwt_service: JWTService = Depends(get_jwt_service)
) -> AuthService:
    """Dépendance pour obtenir le AuthService"""
    return AuthService(user_repository, jwt_service)


def get_message_service(
    message_repository: SQLAlchemyMessageRepository = Depends(get_message_repository)
) -> MessageService:
    """Dépendance pour obtenir le MessageService"""
    return MessageService(message_repository)


def get_user_service(
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository)
) -> UserService:
    """Dépendance pour obtenir le UserService"""
    return UserService(user_repository)
