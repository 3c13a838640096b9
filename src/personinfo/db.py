"""Engine singleton. Created once at import from ``settings.DATABASE_URL``."""
from __future__ import annotations

from pathlib import Path

from sqlalchemy.engine import make_url
from sqlmodel import SQLModel, create_engine

from personinfo.config import settings


def _engine_kwargs(url: str) -> dict:
    parsed = make_url(url)
    kwargs: dict = {"echo": settings.DB_ECHO, "pool_pre_ping": True}
    if parsed.get_backend_name() == "sqlite":
        # FastAPI runs sync endpoints on a thread pool
        kwargs["connect_args"] = {"check_same_thread": False}
        if parsed.database in (None, "", ":memory:"):
            return kwargs
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    kwargs["pool_size"] = settings.DB_POOL_SIZE
    kwargs["max_overflow"] = settings.DB_MAX_OVERFLOW
    return kwargs


engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))


def init_db() -> None:
    """Create all tables registered on ``SQLModel.metadata``."""
    import personinfo.models  # noqa: F401  registers ORM table mappers

    SQLModel.metadata.create_all(engine)
