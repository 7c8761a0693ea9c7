from pydantic import BaseModel
from typing import Optional


class MessageCreateRequest(BaseModel):
    sender: Optional[str] = None  # "me" when omitted
    content: Optional[str] = None
