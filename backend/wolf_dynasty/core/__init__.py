from .config import Settings, get_settings
from .database import create_db_engine, create_session_factory, init_db
from .logging import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "configure_logging",
]
