"""
Database engine and session factory construction.

Nothing here is module-level state: the app factory builds an engine from the
settings and hands the session factory to the storage client.
"""

from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from loguru import logger

from wolf_dynasty.core.config import Settings
from wolf_dynasty.models.database import Base


def create_db_engine(settings: Settings) -> Engine:
    """Create an engine for ``settings.database_url``."""
    url = settings.database_url

    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every session sees an empty database
            return create_engine(
                url,
                connect_args=connect_args,
                poolclass=StaticPool,
                echo=settings.debug,
            )
        _ensure_sqlite_directory(url)
        return create_engine(url, connect_args=connect_args, echo=settings.debug)

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
        echo=settings.debug,
    )


def _ensure_sqlite_directory(url: str) -> None:
    path = url.split(":///", 1)[-1]
    if path:
        Path(path).parent.mkdir(parents=True, exist_ok=True)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Initialize database tables."""
    logger.info("Initializing database...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized successfully")
