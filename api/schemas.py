"""
messagely-api/api/schemas.py
Schémas Pydantic pour la validation et la sérialisation

Les champs sont exposés en camelCase ; les noms snake_case restent
acceptés en entrée.
"""

from typing import Annotated, Optional, List
from datetime import datetime, timezone
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    # La base stocke de l'UTC naïf
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Sérialisé en ISO-8601 avec le suffixe "Z"
UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )

# ============================================================================
# AUTHENTIFICATION
# ============================================================================

class LoginRequest(CamelModel):
    username: Optional[str] = None
    password: Optional[str] = None

class LoginResponse(CamelModel):
    message: str
    token: str

class RegisterRequest(CamelModel):
    username: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None

class RegisterResponse(CamelModel):
    username: str
    token: str

# ============================================================================
# UTILISATEURS
# ============================================================================

class UserProfileResponse(CamelModel):
    """Profil minimal (sans hash ni horodatages)"""
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None

class UserDetailResponse(UserProfileResponse):
    joined_at: Optional[UTCDateTime] = None
    last_login_at: Optional[UTCDateTime] = None

class UserListEnvelope(CamelModel):
    users: List[UserProfileResponse]

class UserDetailEnvelope(CamelModel):
    user: UserDetailResponse

# ============================================================================
# MESSAGES
# ============================================================================

class MessageCreate(CamelModel):
    """Schéma pour envoyer un message"""
    to_username: str
    body: str

class MessageCreatedResponse(CamelModel):
    id: str
    from_username: str
    to_username: str
    body: str
    sent_at: UTCDateTime

class MessageDetailResponse(CamelModel):
    id: str
    body: str
    sent_at: UTCDateTime
    read_at: Optional[UTCDateTime] = None
    from_user: UserProfileResponse
    to_user: UserProfileResponse

class MessageReadResponse(CamelModel):
    id: str
    read_at: Optional[UTCDateTime] = None

class ReceivedMessageResponse(CamelModel):
    """Message de la boîte de réception (avec l'expéditeur)"""
    id: str
    body: str
    sent_at: UTCDateTime
    read_at: Optional[UTCDateTime] = None
    from_user: UserProfileResponse

class SentMessageResponse(CamelModel):
    """Message envoyé (avec le destinataire)"""
    id: str
    body: str
    sent_at: UTCDateTime
    read_at: Optional[UTCDateTime] = None
    to_user: UserProfileResponse

class MessageCreatedEnvelope(CamelModel):
    message: MessageCreatedResponse

class MessageDetailEnvelope(CamelModel):
    message: MessageDetailResponse

class MessageReadEnvelope(CamelModel):
    message: MessageReadResponse

class ReceivedMessagesEnvelope(CamelModel):
    messages: List[ReceivedMessageResponse]

class SentMessagesEnvelope(CamelModel):
    messages: List[SentMessageResponse]
