"""
Entités du domaine
"""

from domain.entities.user import User, UserProfile, UserRegistration, utcnow
from domain.entities.message import Message, MessageDetail

__all__ = [
    "User",
    "UserProfile",
    "UserRegistration",
    "Message",
    "MessageDetail",
    "utcnow"
]
