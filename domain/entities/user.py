"""
Entité User - Modèle métier pour les utilisateurs
"""

from datetime import datetime, timezone
from typing import Optional
from dataclasses import dataclass


def utcnow() -> datetime:
    """Horodatage UTC naïf, tel que stocké en base"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass
class UserProfile:
    """Profil minimal d'un utilisateur (jamais de hash)"""
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None


@dataclass
class User:
    """Entité User du domaine"""
    username: str
    password_hash: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    joined_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None

    def __post_init__(self):
        """Validation de l'entité"""
        if not self.username:
            raise ValueError("Username cannot be empty")
        if not self.password_hash:
            raise ValueError("Password hash cannot be empty")

    def update_last_login(self) -> None:
        """Met à jour la date de dernière connexion"""
        self.last_login_at = utcnow()

    def to_profile(self) -> UserProfile:
        return UserProfile(
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone
        )


@dataclass
class UserRegistration:
    """Données d'inscription (mot de passe en clair, jamais persisté)"""
    username: Optional[str]
    password: Optional[str]
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
