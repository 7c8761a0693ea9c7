import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.deps import get_room_repository, get_message_repository, message_to_dict
from app.db.repository import RoomRepository, MessageRepository
from app.schemas.message import MessageCreateRequest
from app.services.diary import create_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Messages"])


@router.post("/rooms/{room_id}/messages")
def add_message(
    room_id: int,
    data: MessageCreateRequest,
    rooms: RoomRepository = Depends(get_room_repository),
    messages: MessageRepository = Depends(get_message_repository),
):
    result = create_message(rooms, messages, room_id, data.sender, data.content)
    if not result.room_found:
        raise HTTPException(status_code=404, detail="Room not found")
    return message_to_dict(result.message)


@router.get("/rooms/{room_id}/messages")
def list_messages(room_id: int, messages: MessageRepository = Depends(get_message_repository)):
    """Oldest first. Unknown room -> []."""
    return [message_to_dict(m) for m in messages.find_by_room(room_id)]


@router.delete("/messages/{message_id}", status_code=204)
def delete_message(message_id: int, messages: MessageRepository = Depends(get_message_repository)):
    if not messages.delete_by_id(message_id):
        logger.warning("Delete skipped: message %s not found", message_id)
        raise HTTPException(status_code=404, detail="Message not found")
    logger.info("Message %s deleted", message_id)
    return Response(status_code=204)
