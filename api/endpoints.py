"""
messagely-api/api/endpoints.py
Endpoints de l'API : authentification, messages, utilisateurs
"""

import logging

from fastapi import APIRouter, Depends, status

from api import schemas
from api.auth import get_current_user, ensure_correct_user
from application.services.auth_service import AuthService
from application.services.message_service import MessageService
from application.services.user_service import UserService
from domain.entities.user import UserProfile, UserRegistration
from domain.exceptions import BadRequestError, UnauthorizedError
from domain.results import LoginSuccess, InvalidCredentials, MissingCredentials
from infrastructure.dependencies import (
    get_auth_service, get_message_service, get_user_service
)

logger = logging.getLogger(__name__)

auth_router = APIRouter(prefix="/auth", tags=["Authentication"])
messages_router = APIRouter(prefix="/messages", tags=["Messages"])
users_router = APIRouter(prefix="/users", tags=["Users"])

# ============================================================================
# AUTHENTIFICATION
# ============================================================================

@auth_router.post("/login", response_model=schemas.LoginResponse)
def login(
    credentials: schemas.LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Fournit un token JWT en échange de username/password
    et met à jour la date de dernière connexion.
    """
    result = auth_service.login(credentials.username, credentials.password)
    
    if isinstance(result, LoginSuccess):
        logger.info(f"User '{result.username}' logged in")
        return {"message": "Logged in!", "token": result.token}
    if isinstance(result, MissingCredentials):
        raise BadRequestError(result.reason)
    if isinstance(result, InvalidCredentials):
        raise UnauthorizedError(result.reason)
    raise TypeError(f"Unexpected login result: {result!r}")


@auth_router.post("/register", response_model=schemas.RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_in: schemas.RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Inscrit un utilisateur, le connecte et retourne son token.
    """
    result = auth_service.register(UserRegistration(
        username=user_in.username,
        password=user_in.password,
        first_name=user_in.first_name,
        last_name=user_in.last_name,
        phone=user_in.phone
    ))
    return {"username": result.username, "token": result.token}

# ============================================================================
# MESSAGES
# ============================================================================

@messages_router.get("/{message_id}", response_model=schemas.MessageDetailEnvelope)
def get_message(
    message_id: str,
    current_user: UserProfile = Depends(get_current_user),
    message_service: MessageService = Depends(get_message_service)
):
    """
    [JWT Protégé] Détail d'un message (expéditeur ou destinataire uniquement)
    """
    message = message_service.view(message_id, current_user.username)
    return {"message": schemas.MessageDetailResponse.model_validate(message)}


@messages_router.post("", response_model=schemas.MessageCreatedEnvelope, status_code=status.HTTP_201_CREATED)
def send_message(
    message_in: schemas.MessageCreate,
    current_user: UserProfile = Depends(get_current_user),
    message_service: MessageService = Depends(get_message_service)
):
    """
    [JWT Protégé] Envoie un message de la part de l'utilisateur courant
    """
    message = message_service.send(current_user.username, message_in.to_username, message_in.body)
    return {"message": schemas.MessageCreatedResponse.model_validate(message)}


@messages_router.post("/{message_id}/read", response_model=schemas.MessageReadEnvelope)
def mark_message_read(
    message_id: str,
    current_user: UserProfile = Depends(get_current_user),
    message_service: MessageService = Depends(get_message_service)
):
    """
    [JWT Protégé] Marque un message comme lu (destinataire uniquement)
    """
    message = message_service.read(message_id, current_user.username)
    return {"message": schemas.MessageReadResponse.model_validate(message)}

# ============================================================================
# UTILISATEURS
# ============================================================================

@users_router.get("", response_model=schemas.UserListEnvelope)
def list_users(
    current_user: UserProfile = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """
    [JWT Protégé] Liste les profils de tous les utilisateurs
    """
    users = user_service.list_users()
    return {"users": [schemas.UserProfileResponse.model_validate(u) for u in users]}


@users_router.get("/{username}", response_model=schemas.UserDetailEnvelope)
def get_user(
    username: str,
    current_user: UserProfile = Depends(ensure_correct_user),
    user_service: UserService = Depends(get_user_service)
):
    """
    [Utilisateur courant] Profil complet avec les dates d'inscription et de connexion
    """
    user = user_service.get_user(username)
    return {"user": schemas.UserDetailResponse.model_validate(user)}


@users_router.get("/{username}/to", response_model=schemas.ReceivedMessagesEnvelope)
def get_messages_to(
    username: str,
    current_user: UserProfile = Depends(ensure_correct_user),
    message_service: MessageService = Depends(get_message_service)
):
    """
    [Utilisateur courant] Messages reçus
    """
    messages = message_service.inbox(username)
    return {"messages": [schemas.ReceivedMessageResponse.model_validate(m) for m in messages]}


@users_router.get("/{username}/from", response_model=schemas.SentMessagesEnvelope)
def get_messages_from(
    username: str,
    current_user: UserProfile = Depends(ensure_correct_user),
    message_service: MessageService = Depends(get_message_service)
):
    """
    [Utilisateur courant] Messages envoyés
    """
    messages = message_service.outbox(username)
    return {"messages": [schemas.SentMessageResponse.model_validate(m) for m in messages]}
