"""Create diary tables and seed the default room the web UI opens on first load."""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.db.session import SessionLocal, init_db
from app.db.repository import RoomRepository
from app.models import ChatRoom

DEFAULT_ROOM = {"name": "Daily Diary", "theme": "default"}


def seed_default_room(db) -> ChatRoom | None:
    """Insert DEFAULT_ROOM when the table is empty. Returns the new room, or None."""
    rooms = RoomRepository(db)
    if rooms.find_all():
        return None
    return rooms.insert(ChatRoom(**DEFAULT_ROOM))


if __name__ == "__main__":
    init_db()
    db = SessionLocal()
    try:
        room = seed_default_room(db)
        if room:
            print(f"Created room {room.id}: {room.name}")
        else:
            print("Rooms already exist. Skipping seed.")
    finally:
        db.close()
    print("Init complete.")
