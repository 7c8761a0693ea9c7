from sqlalchemy import Column, Integer, String, Text, DateTime
from app.db.session import Base


class Message(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, index=True)
    room_id = Column(Integer, nullable=False, index=True)  # chat_rooms.id, checked on create only
    sender = Column(String(100), nullable=True, default="me")
    content = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, index=True)  # set by the API, never by clients

    def __repr__(self):
        return f"<Message {self.id} room={self.room_id} by {self.sender}>"
