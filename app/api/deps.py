from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.db.repository import RoomRepository, MessageRepository
from app.models.room import ChatRoom
from app.models.message import Message


def get_room_repository(db: Session = Depends(get_db)) -> RoomRepository:
    return RoomRepository(db)


def get_message_repository(db: Session = Depends(get_db)) -> MessageRepository:
    return MessageRepository(db)


def room_to_dict(room: ChatRoom) -> dict:
    return {"id": room.id, "name": room.name, "theme": room.theme}


def message_to_dict(msg: Message) -> dict:
    return {
        "id": msg.id,
        "roomId": msg.room_id,
        "sender": msg.sender,
        "content": msg.content,
        "createdAt": msg.created_at.isoformat() if msg.created_at else None,
    }
