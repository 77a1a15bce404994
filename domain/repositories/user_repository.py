"""
Interface UserRepository - Définit les opérations d'accès aux données pour User
"""

from abc import ABC, abstractmethod
from typing import List
from domain.entities.user import User, UserProfile, UserRegistration


class UserRepository(ABC):
    """Interface pour le repository des utilisateurs (credential store)"""
    
    @abstractmethod
    def register(self, registration: UserRegistration) -> User:
        """Hache le mot de passe et crée l'utilisateur (ConflictError si doublon)"""
        pass
    
    @abstractmethod
    def authenticate(self, username: str, password: str) -> bool:
        """Vérifie le couple username/mot de passe (False si l'utilisateur est inconnu)"""
        pass
    
    @abstractmethod
    def touch_login(self, username: str) -> User:
        """Met à jour last_login_at (NotFoundError si inconnu)"""
        pass
    
    @abstractmethod
    def get_all(self) -> List[UserProfile]:
        """Retourne les profils minimaux de tous les utilisateurs"""
        pass
    
    @abstractmethod
    def get_by_username(self, username: str) -> User:
        """Retourne l'utilisateur complet (NotFoundError si inconnu)"""
        pass
