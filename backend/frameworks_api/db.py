from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from .config import settings
from .models import Base


def _engine_options(database_url: str) -> dict[str, Any]:
    if database_url.startswith("sqlite"):
        # TestClient and uvicorn workers reuse connections across threads.
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_timeout": settings.db_pool_timeout,
        "pool_recycle": settings.db_pool_recycle,
    }


def _create_engine(database_url: str) -> Engine:
    return create_engine(database_url, pool_pre_ping=True, **_engine_options(database_url))


_engine = _create_engine(settings.database_url)
SessionLocal = sessionmaker(bind=_engine, autoflush=False, expire_on_commit=False)


def reset_database_engine(database_url: str | None = None) -> None:
    """Point the session factory at a new URL, disposing the old pool."""
    global _engine
    if database_url:
        object.__setattr__(settings, "database_url", database_url)

    _engine.dispose()
    _engine = _create_engine(settings.database_url)
    SessionLocal.configure(bind=_engine)


@contextmanager
def get_db() -> Iterator[Session]:
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def check_db_connection() -> None:
    with _engine.connect() as connection:
        connection.execute(text("SELECT 1"))


def init_db() -> None:
    Base.metadata.create_all(bind=_engine)
