"""
Modèles SQLAlchemy - Tables users et messages
"""

import uuid
from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import declarative_base

from domain.entities.user import utcnow

Base = declarative_base()


class UserModel(Base):
    """Modèle SQLAlchemy pour les utilisateurs"""
    __tablename__ = "users"
    
    username = Column(String, primary_key=True)
    password_hash = Column(String, nullable=False)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    joined_at = Column(DateTime, default=utcnow, nullable=False)
    last_login_at = Column(DateTime, nullable=True)


class MessageModel(Base):
    """Modèle SQLAlchemy pour les messages"""
    __tablename__ = "messages"
    
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    from_username = Column(String, ForeignKey("users.username"), nullable=False, index=True)
    to_username = Column(String, ForeignKey("users.username"), nullable=False, index=True)
    body = Column(Text, nullable=False)
    sent_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    read_at = Column(DateTime, nullable=True)
