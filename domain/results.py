"""
Types de résultat pour l'authentification

Chaque branche d'un login ou d'une vérification d'identité produit une
valeur explicite : la couche API doit traiter tous les cas.
"""

from dataclasses import dataclass
from typing import Union

from domain.entities.user import User


@dataclass(frozen=True)
class Authenticated:
    """Identité vérifiée"""
    user: User


@dataclass(frozen=True)
class AuthFailure:
    """Échec d'authentification (identifiants ou token invalides)"""
    reason: str


AuthResult = Union[Authenticated, AuthFailure]


@dataclass(frozen=True)
class LoginSuccess:
    """Connexion réussie : token signé émis"""
    username: str
    token: str


@dataclass(frozen=True)
class InvalidCredentials:
    """Nom d'utilisateur inconnu ou mot de passe incorrect"""
    reason: str = "Invalid username or password"


@dataclass(frozen=True)
class MissingCredentials:
    """Champs requis absents de la requête"""
    reason: str = "Username and password required"


LoginResult = Union[LoginSuccess, InvalidCredentials, MissingCredentials]
