import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_room_repository, room_to_dict
from app.db.repository import RoomRepository
from app.models.room import ChatRoom
from app.schemas.room import RoomCreateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Rooms"])


@router.post("/rooms")
def create_room(data: RoomCreateRequest, rooms: RoomRepository = Depends(get_room_repository)):
    room = rooms.insert(ChatRoom(name=data.name, theme=data.theme))
    logger.info("Room %s created (theme=%s)", room.id, room.theme)
    return room_to_dict(room)


@router.get("/rooms")
def list_rooms(rooms: RoomRepository = Depends(get_room_repository)):
    return [room_to_dict(r) for r in rooms.find_all()]
