"""Central config — values come from .env / environment, fallbacks live here only."""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent.parent


def get_database_url() -> str:
    """DATABASE_URL from env, local SQLite file otherwise."""
    return (os.getenv("DATABASE_URL") or "").strip() or "sqlite:///./diary.db"


def get_log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "").strip().upper() or "INFO"


def get_static_dir() -> Path:
    """Folder with the browser UI (index.html, app.js)."""
    value = (os.getenv("STATIC_DIR") or "").strip()
    return Path(value) if value else BASE_DIR / "static"


def get_server_bind() -> tuple[str, int]:
    host = (os.getenv("HOST") or "").strip() or "0.0.0.0"
    port = int(os.getenv("PORT", "8080"))
    return host, port
