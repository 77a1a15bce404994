"""
Implémentations des repositories SQLAlchemy
"""

import logging
import uuid
from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, aliased

from domain.entities import User, UserProfile, UserRegistration, Message, MessageDetail, utcnow
from domain.exceptions import BadRequestError, ConflictError, NotFoundError
from domain.repositories import UserRepository, MessageRepository
from infrastructure.database.models import UserModel, MessageModel
from infrastructure.database.mappers import UserMapper, MessageMapper
from infrastructure.security.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository(UserRepository):
    """Implémentation SQLAlchemy du UserRepository"""
    
    def __init__(self, session: Session, password_hasher: PasswordHasher):
        self.session = session
        self.password_hasher = password_hasher
    
    def _find_model(self, username: str):
        return self.session.query(UserModel).filter(UserModel.username == username).first()
    
    def register(self, registration: UserRegistration) -> User:
        """Hache le mot de passe puis insère l'utilisateur"""
        if not registration.password:
            raise BadRequestError("Password cannot be empty")
        if self._find_model(registration.username):
            raise ConflictError(f"Username '{registration.username}' already exists")
        
        now = utcnow()
        try:
            user = User(
                username=registration.username,
                password_hash=self.password_hasher.hash(registration.password),
                first_name=registration.first_name,
                last_name=registration.last_name,
                phone=registration.phone,
                joined_at=now,
                last_login_at=now
            )
        except ValueError as e:
            raise BadRequestError(str(e))
        
        model = UserMapper.to_model(user)
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            logger.warning(f"Duplicate registration for username '{user.username}'")
            raise ConflictError(f"Username '{user.username}' already exists")
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error saving user: {e}")
            raise
        
        self.session.refresh(model)
        return UserMapper.to_domain(model)
    
    def authenticate(self, username: str, password: str) -> bool:
        """Vérifie le mot de passe contre le hash stocké"""
        model = self._find_model(username)
        if not model:
            # Même coût bcrypt que pour un utilisateur existant
            self.password_hasher.dummy_verify()
            return False
        return self.password_hasher.verify(password, model.password_hash)
    
    def touch_login(self, username: str) -> User:
        """Met à jour la date de dernière connexion"""
        model = self._find_model(username)
        if not model:
            raise NotFoundError(f"No such user: {username}")
        
        user = UserMapper.to_domain(model)
        user.update_last_login()
        model = UserMapper.to_model(user, model)
        
        try:
            self.session.commit()
            self.session.refresh(model)
            return UserMapper.to_domain(model)
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error updating last login: {e}")
            raise
    
    def get_all(self) -> List[UserProfile]:
        """Retourne tous les utilisateurs"""
        models = self.session.query(UserModel).order_by(UserModel.username).all()
        return [UserMapper.to_profile(model) for model in models]
    
    def get_by_username(self, username: str) -> User:
        """Trouve un utilisateur par son nom d'utilisateur"""
        model = self._find_model(username)
        if not model:
            raise NotFoundError(f"{username} could not be found")
        return UserMapper.to_domain(model)


class SQLAlchemyMessageRepository(MessageRepository):
    """Implémentation SQLAlchemy du MessageRepository"""
    
    def __init__(self, session: Session):
        self.session = session
    
    def _detail_query(self):
        """Message joint avec l'expéditeur et le destinataire (tables aliasées)"""
        sender = aliased(UserModel, name="sender")
        recipient = aliased(UserModel, name="recipient")
        return (
            self.session.query(MessageModel, sender, recipient)
            .select_from(MessageModel)
            .join(sender, MessageModel.from_username == sender.username)
            .join(recipient, MessageModel.to_username == recipient.username)
        )
    
    def _user_exists(self, username: str) -> bool:
        return (
            self.session.query(UserModel.username)
            .filter(UserModel.username == username)
            .first()
        ) is not None
    
    def create(self, from_username: str, to_username: str, body: str) -> Message:
        """Crée un message"""
        for username in (from_username, to_username):
            if not username or not self._user_exists(username):
                raise NotFoundError(f"No such user: {username}")
        
        if not body or not body.strip():
            raise BadRequestError("Message body cannot be empty")
        
        message = Message(
            id=str(uuid.uuid4()),
            from_username=from_username,
            to_username=to_username,
            body=body,
            sent_at=utcnow()
        )
        
        model = MessageMapper.to_model(message)
        self.session.add(model)
        try:
            self.session.commit()
            self.session.refresh(model)
            return MessageMapper.to_domain(model)
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error saving message: {e}")
            raise
    
    def get_by_id(self, message_id: str) -> MessageDetail:
        """Trouve un message par son ID, avec les deux profils"""
        row = self._detail_query().filter(MessageModel.id == message_id).first()
        if not row:
            raise NotFoundError(f"No such message: {message_id}")
        return MessageMapper.to_detail(*row)
    
    def mark_read(self, message_id: str) -> Message:
        """Fixe read_at s'il n'est pas déjà défini"""
        model = self.session.query(MessageModel).filter(MessageModel.id == message_id).first()
        if not model:
            raise NotFoundError(f"No such message: {message_id}")
        
        message = MessageMapper.to_domain(model)
        if message.is_read():
            return message
        
        message.mark_as_read()
        model.read_at = message.read_at
        try:
            self.session.commit()
            self.session.refresh(model)
            return MessageMapper.to_domain(model)
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error marking message as read: {e}")
            raise
    
    def list_sent_by(self, username: str) -> List[MessageDetail]:
        """Messages envoyés par l'utilisateur"""
        rows = (
            self._detail_query()
            .filter(MessageModel.from_username == username)
            .order_by(MessageModel.sent_at.asc(), MessageModel.id.asc())
            .all()
        )
        return [MessageMapper.to_detail(*row) for row in rows]
    
    def list_received_by(self, username: str) -> List[MessageDetail]:
        """Messages reçus par l'utilisateur"""
        rows = (
            self._detail_query()
            .filter(MessageModel.to_username == username)
            .order_by(MessageModel.sent_at.asc(), MessageModel.id.asc())
            .all()
        )
        return [MessageMapper.to_detail(*row) for row in rows]
