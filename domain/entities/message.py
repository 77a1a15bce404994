"""
Entité Message - Modèle métier pour les messages directs
"""

from datetime import datetime
from typing import Optional
from dataclasses import dataclass

from domain.entities.user import UserProfile, utcnow


@dataclass
class Message:
    """Entité Message du domaine"""
    id: str
    from_username: str
    to_username: str
    body: str
    sent_at: Optional[datetime] = None
    read_at: Optional[datetime] = None

    def __post_init__(self):
        """Validation de l'entité"""
        if self.read_at is not None and self.sent_at is not None and self.read_at < self.sent_at:
            raise ValueError("read_at cannot precede sent_at")

    def is_read(self) -> bool:
        return self.read_at is not None

    def mark_as_read(self) -> None:
        """Marque le message comme lu (une seule fois)"""
        if self.read_at is None:
            self.read_at = utcnow()


@dataclass
class MessageDetail:
    """Message joint avec les profils de l'expéditeur et du destinataire"""
    id: str
    body: str
    sent_at: datetime
    read_at: Optional[datetime]
    from_user: UserProfile
    to_user: UserProfile

    def involves(self, username: str) -> bool:
        """Vérifie si l'utilisateur est expéditeur ou destinataire"""
        return username in (self.from_user.username, self.to_user.username)
