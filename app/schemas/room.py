from pydantic import BaseModel
from typing import Optional


class RoomCreateRequest(BaseModel):
    name: Optional[str] = None
    theme: Optional[str] = None  # e.g. "work", "mental-health"
