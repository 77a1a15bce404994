"""
Services applicatifs
"""

from application.services.auth_service import AuthService
from application.services.message_service import MessageService
from application.services.user_service import UserService

__all__ = [
    "AuthService",
    "MessageService",
    "UserService"
]
