"""
Storage layer — one Repository per table, bound to a Session passed in by the caller.
- insert commits and refreshes so the generated id is on the returned row
- lookups return None / False / [] for missing ids, never raise
- ids outside the signed 64-bit range cannot exist and are treated as missing
"""
from sqlalchemy.orm import Session

from app.models.room import ChatRoom
from app.models.message import Message

MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def storable_id(record_id: int) -> bool:
    return MIN_ID <= record_id <= MAX_ID


class Repository:
    model = None

    def __init__(self, db: Session):
        self.db = db

    def insert(self, record):
        record.id = None  # always let the database assign it
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def find_by_id(self, record_id: int):
        if not storable_id(record_id):
            return None
        return self.db.get(self.model, record_id)

    def exists_by_id(self, record_id: int) -> bool:
        if not storable_id(record_id):
            return False
        return self.db.query(self.model.id).filter(self.model.id == record_id).first() is not None

    def find_all(self) -> list:
        return self.db.query(self.model).order_by(self.model.id).all()

    def delete_by_id(self, record_id: int) -> bool:
        if not storable_id(record_id):
            return False
        deleted = self.db.query(self.model).filter(self.model.id == record_id).delete()
        self.db.commit()
        return deleted > 0


class RoomRepository(Repository):
    model = ChatRoom


class MessageRepository(Repository):
    model = Message

    def find_by_room(self, room_id: int) -> list[Message]:
        if not storable_id(room_id):
            return []
        return (
            self.db.query(Message)
            .filter(Message.room_id == room_id)
            .order_by(Message.created_at.asc(), Message.id.asc())
            .all()
        )
