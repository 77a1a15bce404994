"""Tests unitaires pour MessageService."""

import uuid
from typing import Dict, List

import pytest

from application.services.message_service import MessageService
from domain.entities.message import Message, MessageDetail
from domain.entities.user import UserProfile, utcnow
from domain.exceptions import ForbiddenError, NotFoundError
from domain.repositories.message_repository import MessageRepository


class InMemoryMessageRepository(MessageRepository):
    """Implémentation en mémoire de MessageRepository pour les tests."""

    def __init__(self, profiles: List[UserProfile]) -> None:
        self._profiles: Dict[str, UserProfile] = {p.username: p for p in profiles}
        self._messages: List[Message] = []

    def _detail(self, message: Message) -> MessageDetail:
        return MessageDetail(
            id=message.id,
            body=message.body,
            sent_at=message.sent_at,
            read_at=message.read_at,
            from_user=self._profiles[message.from_username],
            to_user=self._profiles[message.to_username],
        )

    def _find(self, message_id: str) -> Message:
        message = next((m for m in self._messages if m.id == message_id), None)
        if message is None:
            raise NotFoundError(f"No such message: {message_id}")
        return message

    def create(self, from_username: str, to_username: str, body: str) -> Message:
        for username in (from_username, to_username):
            if username not in self._profiles:
                raise NotFoundError(f"No such user: {username}")
        message = Message(
            id=str(uuid.uuid4()),
            from_username=from_username,
            to_username=to_username,
            body=body,
            sent_at=utcnow(),
        )
        self._messages.append(message)
        return message

    def get_by_id(self, message_id: str) -> MessageDetail:
        return self._detail(self._find(message_id))

    def mark_read(self, message_id: str) -> Message:
        message = self._find(message_id)
        message.mark_as_read()
        return message

    def list_sent_by(self, username: str) -> List[MessageDetail]:
        return [self._detail(m) for m in self._messages if m.from_username == username]

    def list_received_by(self, username: str) -> List[MessageDetail]:
        return [self._detail(m) for m in self._messages if m.to_username == username]


@pytest.fixture
def service():
    repo = InMemoryMessageRepository([
        UserProfile("alice", "Alice", "Liddell", "555-0100"),
        UserProfile("bob", "Bob", "Builder", "555-0101"),
        UserProfile("carol", "Carol", "Danvers", "555-0102"),
    ])
    return MessageService(repo)


def test_send_to_unknown_user_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.send("alice", "nobody", "hi")


def test_view_allowed_for_sender_and_recipient_only(service):
    message = service.send("alice", "bob", "hi")

    assert service.view(message.id, "alice").body == "hi"
    assert service.view(message.id, "bob").to_user.username == "bob"
    with pytest.raises(ForbiddenError):
        service.view(message.id, "carol")


def test_read_forbidden_for_anyone_but_recipient(service):
    message = service.send("alice", "bob", "hi")

    for username in ("alice", "carol"):
        with pytest.raises(ForbiddenError):
            service.read(message.id, username)

    assert service.view(message.id, "bob").read_at is None


def test_read_marks_message_once(service):
    message = service.send("alice", "bob", "hi")

    first = service.read(message.id, "bob")
    second = service.read(message.id, "bob")

    assert first.read_at is not None
    assert second.read_at == first.read_at
    assert first.read_at >= message.sent_at


def test_view_and_read_unknown_message(service):
    with pytest.raises(NotFoundError):
        service.view("missing", "alice")
    with pytest.raises(NotFoundError):
        service.read("missing", "bob")


def test_inbox_and_outbox(service):
    service.send("alice", "bob", "one")
    service.send("carol", "bob", "two")
    service.send("bob", "alice", "three")

    assert [m.body for m in service.inbox("bob")] == ["one", "two"]
    assert [m.body for m in service.outbox("bob")] == ["three"]
    assert service.inbox("carol") == []
