"""Diary operations that need more than a single repository call."""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.db.repository import RoomRepository, MessageRepository
from app.models.message import Message

logger = logging.getLogger(__name__)

DEFAULT_SENDER = "me"


@dataclass(frozen=True)
class MessageResult:
    """Outcome of create_message. Build with found() / not_found()."""
    message: Optional[Message]
    room_found: bool

    @classmethod
    def found(cls, message: Message) -> "MessageResult":
        return cls(message=message, room_found=True)

    @classmethod
    def not_found(cls) -> "MessageResult":
        return cls(message=None, room_found=False)


def create_message(
    rooms: RoomRepository,
    messages: MessageRepository,
    room_id: int,
    sender: Optional[str],
    content: Optional[str],
) -> MessageResult:
    if not rooms.exists_by_id(room_id):
        logger.warning("Message rejected: room %s not found", room_id)
        return MessageResult.not_found()
    msg = Message(
        room_id=room_id,
        sender=sender if sender is not None else DEFAULT_SENDER,
        content=content,
        created_at=datetime.now(),
    )
    saved = messages.insert(msg)
    logger.info("Message %s added to room %s", saved.id, room_id)
    return MessageResult.found(saved)
