"""
MessageService - Service applicatif pour les messages directs

Les contrôles d'appartenance (expéditeur / destinataire) sont faits ici,
pas dans les routes.
"""

import logging
from typing import List

from domain.entities.message import Message, MessageDetail
from domain.exceptions import ForbiddenError
from domain.repositories.message_repository import MessageRepository

logger = logging.getLogger(__name__)


class MessageService:
    """Service pour l'envoi et la lecture des messages"""
    
    def __init__(self, message_repository: MessageRepository):
        self.message_repository = message_repository
    
    def send(self, from_username: str, to_username: str, body: str) -> Message:
        """Envoie un message de l'utilisateur authentifié"""
        message = self.message_repository.create(from_username, to_username, body)
        logger.info(f"Message {message.id} sent from '{from_username}' to '{to_username}'")
        return message
    
    def view(self, message_id: str, requesting_username: str) -> MessageDetail:
        """Retourne un message si l'utilisateur en est l'expéditeur ou le destinataire"""
        message = self.message_repository.get_by_id(message_id)
        if not message.involves(requesting_username):
            logger.warning(f"User '{requesting_username}' denied access to message {message_id}")
            raise ForbiddenError("Cannot view this message")
        return message
    
    def read(self, message_id: str, requesting_username: str) -> Message:
        """Marque un message comme lu (destinataire uniquement)"""
        message = self.message_repository.get_by_id(message_id)
        if message.to_user.username != requesting_username:
            logger.warning(f"User '{requesting_username}' cannot mark message {message_id} as read")
            raise ForbiddenError("Only the recipient can mark this message as read")
        return self.message_repository.mark_read(message_id)
    
    def inbox(self, username: str) -> List[MessageDetail]:
        """Messages reçus par l'utilisateur"""
        return self.message_repository.list_received_by(username)
    
    def outbox(self, username: str) -> List[MessageDetail]:
        """Messages envoyés par l'utilisateur"""
        return self.message_repository.list_sent_by(username)
