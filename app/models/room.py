from sqlalchemy import Column, Integer, String
from app.db.session import Base


class ChatRoom(Base):
    """A diary topic, e.g. "2025 Journal" / "work"."""
    __tablename__ = "chat_rooms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=True)
    theme = Column(String(100), nullable=True)

    def __repr__(self):
        return f"<ChatRoom {self.id}: {self.name}>"
