from fastapi import APIRouter

router = APIRouter(prefix="/api", tags=["Health"])

PING_REPLY = "Pong! Diary API is alive."


@router.get("/ping")
def ping():
    """Liveness check — no database access."""
    return PING_REPLY
