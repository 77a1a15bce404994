"""
Interface MessageRepository - Définit les opérations d'accès aux données pour Message
"""

from abc import ABC, abstractmethod
from typing import List
from domain.entities.message import Message, MessageDetail


class MessageRepository(ABC):
    """Interface pour le repository des messages (message store)"""
    
    @abstractmethod
    def create(self, from_username: str, to_username: str, body: str) -> Message:
        """Crée un message non lu"""
        pass
    
    @abstractmethod
    def get_by_id(self, message_id: str) -> MessageDetail:
        """Retourne le message avec les profils des deux parties"""
        pass
    
    @abstractmethod
    def mark_read(self, message_id: str) -> Message:
        """Marque le message comme lu (idempotent)"""
        pass
    
    @abstractmethod
    def list_sent_by(self, username: str) -> List[MessageDetail]:
        """Messages envoyés par l'utilisateur, par date d'envoi croissante"""
        pass
    
    @abstractmethod
    def list_received_by(self, username: str) -> List[MessageDetail]:
        """Messages reçus par l'utilisateur, par date d'envoi croissante"""
        pass
