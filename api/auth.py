"""
messagely-api/api/auth.py
Contrôle d'accès (dépendances FastAPI) : token Bearer et utilisateur courant
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from application.services.auth_service import AuthService
from domain.entities.user import UserProfile
from domain.exceptions import ForbiddenError, UnauthorizedError
from domain.results import AuthFailure
from infrastructure.dependencies import get_auth_service

logger = logging.getLogger(__name__)

# Header absent ou mal formé : on répond 401 nous-mêmes
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service)
) -> UserProfile:
    """
    Dépendance FastAPI : décode le token Bearer et retourne l'utilisateur.
    L'identité est aussi attachée à request.state.user.
    """
    token = credentials.credentials if credentials else None
    result = auth_service.resolve_token(token)
    if isinstance(result, AuthFailure):
        raise UnauthorizedError(result.reason)
    
    user = result.user.to_profile()
    request.state.user = user
    return user


def require_same_user(expected_username: str, current_user: UserProfile) -> UserProfile:
    """Vérifie que l'utilisateur authentifié est bien celui attendu"""
    if current_user.username != expected_username:
        logger.warning(f"User '{current_user.username}' tried to access resources of '{expected_username}'")
        raise ForbiddenError("Cannot access another user's resources")
    return current_user


def ensure_correct_user(
    username: str,
    current_user: UserProfile = Depends(get_current_user)
) -> UserProfile:
    """
    Dépendance qui vérifie que l'utilisateur courant correspond
    au paramètre de chemin {username}.
    """
    return require_same_user(username, current_user)
