"""
UserService - Service applicatif pour la consultation des utilisateurs
"""

from typing import List
from domain.entities.user import User, UserProfile
from domain.repositories.user_repository import UserRepository


class UserService:
    """Service pour la gestion des utilisateurs"""
    
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository
    
    def list_users(self) -> List[UserProfile]:
        """Récupère les profils de tous les utilisateurs"""
        return self.user_repository.get_all()
    
    def get_user(self, username: str) -> User:
        """Récupère un utilisateur par son nom d'utilisateur"""
        return self.user_repository.get_by_username(username)
