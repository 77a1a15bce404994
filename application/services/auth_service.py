"""
AuthService - Service applicatif pour l'inscription, la connexion et les tokens
"""

import logging
from typing import Any, Dict, Optional

from domain.entities.user import UserRegistration
from domain.exceptions import BadRequestError, NotFoundError, UnauthorizedError
from domain.repositories.user_repository import UserRepository
from domain.results import (
    AuthResult, Authenticated, AuthFailure,
    LoginResult, LoginSuccess, InvalidCredentials, MissingCredentials
)
from infrastructure.security.jwt_service import JWTService

logger = logging.getLogger(__name__)


class AuthService:
    """Service pour l'authentification des utilisateurs"""
    
    def __init__(self, user_repository: UserRepository, jwt_service: JWTService):
        self.user_repository = user_repository
        self.jwt_service = jwt_service
    
    def authenticate(self, username: Optional[str], password: Optional[str]) -> AuthResult:
        """Authentifie un utilisateur avec son nom d'utilisateur et mot de passe"""
        if not username or not password:
            return AuthFailure("Username and password required")
        
        if not self.user_repository.authenticate(username, password):
            logger.warning(f"Authentication failed for user '{username}'")
            return AuthFailure("Invalid username or password")
        
        logger.info(f"Authentication success: User '{username}' authenticated")
        return Authenticated(self.user_repository.get_by_username(username))
    
    def login(self, username: Optional[str], password: Optional[str]) -> LoginResult:
        """
        Connecte un utilisateur.
        
        Returns:
            LoginSuccess avec le token signé, InvalidCredentials ou MissingCredentials
        """
        if not username or not password:
            return MissingCredentials()
        
        result = self.authenticate(username, password)
        if isinstance(result, AuthFailure):
            return InvalidCredentials()
        
        return self._issue_login(result.user.username)
    
    def register(self, registration: UserRegistration) -> LoginSuccess:
        """Inscrit un utilisateur puis le connecte (retourne un token)"""
        if not registration.username or not registration.password:
            raise BadRequestError("Username and password required")
        
        user = self.user_repository.register(registration)
        logger.info(f"User '{user.username}' registered")
        return self._issue_login(user.username)
    
    def issue_token(self, username: str) -> str:
        """Émet un token signé portant le nom d'utilisateur"""
        return self.jwt_service.create_access_token({"username": username})
    
    def verify_token(self, token: Optional[str]) -> Dict[str, Any]:
        """Vérifie la signature et retourne les claims du token"""
        if not token:
            raise UnauthorizedError("Authentication token required")
        try:
            payload = self.jwt_service.decode_token(token)
        except ValueError:
            raise UnauthorizedError("Invalid token")
        
        if not payload.get("username"):
            logger.warning("JWT invalid: missing 'username' claim")
            raise UnauthorizedError("Invalid token")
        return payload
    
    def resolve_token(self, token: Optional[str]) -> AuthResult:
        """Vérifie le token et retourne l'utilisateur correspondant"""
        try:
            username = self.verify_token(token)["username"]
        except UnauthorizedError as e:
            return AuthFailure(e.message)
        
        try:
            user = self.user_repository.get_by_username(username)
        except NotFoundError:
            logger.warning(f"JWT invalid: User '{username}' not found in DB")
            return AuthFailure("Invalid token")
        return Authenticated(user)
    
    def _issue_login(self, username: str) -> LoginSuccess:
        self.user_repository.touch_login(username)
        return LoginSuccess(username=username, token=self.issue_token(username))
