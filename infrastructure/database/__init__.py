"""
Infrastructure Database - Configuration et repositories SQLAlchemy
"""

from infrastructure.database.session import create_db_engine, create_session_factory
from infrastructure.database.models import Base, UserModel, MessageModel
from infrastructure.database.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyMessageRepository
)
from infrastructure.database.init_db import init_db

__all__ = [
    "Base",
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "UserModel",
    "MessageModel",
    "SQLAlchemyUserRepository",
    "SQLAlchemyMessageRepository"
]
