import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_log_level, get_static_dir, get_server_bind
from app.db.session import init_db
from app.api.health import router as health_router
from app.api.rooms import router as rooms_router
from app.api.messages import router as messages_router

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Personal Diary API")

# CORS for the diary frontend when served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def create_tables():
    init_db()
    logger.info("Diary tables ready")


# Include routers
app.include_router(health_router)
app.include_router(rooms_router)
app.include_router(messages_router)


def mount_frontend(application: FastAPI, directory: Path) -> bool:
    """Serve the browser UI (index.html + app.js) at / if the folder exists."""
    if not directory.is_dir():
        logger.info("No frontend at %s, serving API only", directory)
        return False
    application.mount("/", StaticFiles(directory=str(directory), html=True), name="frontend")
    return True


# Must come after the routers, "/" would shadow /api otherwise
mount_frontend(app, get_static_dir())


if __name__ == "__main__":
    import uvicorn

    host, port = get_server_bind()
    uvicorn.run("main:app", host=host, port=port, reload=True)
