import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.engine import make_url

from apartment.config import settings
from apartment.database import engine
from apartment.errors import register_exception_handlers
from apartment.log_config import configure_logging
from apartment.models import Base
from apartment.routers import admin, auth, interiors, rooms

logger = logging.getLogger(__name__)


def _ensure_sqlite_dir(url: str) -> None:
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database and parsed.database != ":memory:":
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    _ensure_sqlite_dir(settings.database_url)

    # create tables on startup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("%s started", settings.app_name)

    yield

    await engine.dispose()


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# routers
app.include_router(rooms.router)
app.include_router(interiors.router)
app.include_router(admin.router)
app.include_router(auth.router)
app.include_router(rooms.playlist_router)


@app.get("/", response_class=PlainTextResponse)
async def read_root():
    return settings.banner
