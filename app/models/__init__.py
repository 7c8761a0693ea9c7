from app.models.room import ChatRoom
from app.models.message import Message

__all__ = ["ChatRoom", "Message"]
