"""
Service container handed to the route registrar.

Built once per application from the settings, or injected by tests.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from loguru import logger

from wolf_dynasty.core import Settings, create_db_engine, create_session_factory, init_db
from wolf_dynasty.core.clock import utc_now

from .data import YahooFantasyClient
from .teams import InMemoryTeamsClient, SQLTeamsClient, TeamsClient

MEMORY_DATABASE_URL = "memory://"


@dataclass
class Services:
    teams_client: TeamsClient
    yahoo_client: YahooFantasyClient
    clock: Callable[[], datetime] = utc_now
    # Run on application shutdown (engine disposal, HTTP client close)
    closers: list[Callable[[], None]] = field(default_factory=list)

    def close(self) -> None:
        for close in self.closers:
            close()


def build_services(settings: Settings) -> Services:
    """Wire the storage and provider clients described by ``settings``."""
    yahoo_client = YahooFantasyClient(
        access_token=settings.yahoo_access_token,
        base_url=settings.yahoo_api_base_url,
        timeout=settings.yahoo_timeout,
    )
    closers = [yahoo_client.close]

    if settings.database_url == MEMORY_DATABASE_URL:
        logger.warning("Using in-memory team storage; data is lost on restart")
        teams_client: TeamsClient = InMemoryTeamsClient()
    else:
        engine = create_db_engine(settings)
        init_db(engine)
        teams_client = SQLTeamsClient(create_session_factory(engine))
        closers.append(engine.dispose)

    return Services(teams_client=teams_client, yahoo_client=yahoo_client, closers=closers)
