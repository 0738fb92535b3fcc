"""Pytest configuration and fixtures for all tests."""

from datetime import datetime, timedelta, timezone
from typing import Callable, Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from wolf_dynasty.core import Settings, create_db_engine, create_session_factory, init_db
from wolf_dynasty.core.errors import TeamNotFoundError
from wolf_dynasty.main import create_app
from wolf_dynasty.schemas import Team
from wolf_dynasty.services import Services
from wolf_dynasty.services.data import YahooFantasyClient
from wolf_dynasty.services.teams import InMemoryTeamsClient, SQLTeamsClient, TeamsClient

T0 = datetime(2024, 9, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Returns ``start``, then advances by ``step`` on every call."""

    def __init__(self, start: datetime = T0, step: timedelta = timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.now
        self.now = now + self.step
        return now


class FakeTeamsClient(TeamsClient):
    """
    Scriptable teams client.

    Set ``<operation>_returns`` / ``<operation>_raises`` before the request;
    every call is recorded in ``calls`` as ``(operation, argument)``.
    """

    def __init__(self):
        self.calls: list[tuple[str, object]] = []
        self.list_teams_returns: list[Team] = []
        self.list_teams_raises: Exception | None = None
        self.create_team_returns: Team | None = None
        self.create_team_raises: Exception | None = None
        self.get_team_returns: Team | None = None
        self.get_team_raises: Exception | None = None
        self.update_team_returns: Team | None = None
        self.update_team_raises: Exception | None = None
        self.delete_team_raises: Exception | None = None

    def _record(self, op: str, arg: object = None) -> None:
        self.calls.append((op, arg))
        err = getattr(self, f"{op}_raises")
        if err is not None:
            raise err

    def called(self, op: str) -> list:
        return [arg for name, arg in self.calls if name == op]

    def list_teams(self) -> list[Team]:
        self._record("list_teams")
        return self.list_teams_returns

    def create_team(self, team: Team) -> Team:
        self._record("create_team", team)
        return self.create_team_returns or team

    def get_team(self, team_id: str) -> Team:
        self._record("get_team", team_id)
        if self.get_team_returns is None:
            raise TeamNotFoundError(team_id)
        return self.get_team_returns.model_copy()

    def update_team(self, team: Team) -> Team:
        self._record("update_team", team)
        return self.update_team_returns or team

    def delete_team(self, team: Team) -> None:
        self._record("delete_team", team)


def make_team(team_id: str = "1", name: str = "Awesome Team", at: datetime = T0) -> Team:
    return Team(id=team_id, name=name, created_at=at, updated_at=at)


# ============================================================================
# Settings / storage fixtures
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the developer's .env file."""
    return Settings(_env_file=None, database_url="sqlite://", yahoo_access_token="test-token")


@pytest.fixture
def sql_teams_client(settings: Settings) -> Generator[SQLTeamsClient, None, None]:
    """SQL client over a private in-memory SQLite database."""
    engine = create_db_engine(settings)
    init_db(engine)
    yield SQLTeamsClient(create_session_factory(engine))
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def teams_client(request) -> TeamsClient:
    """Every shipped TeamsClient implementation."""
    if request.param == "memory":
        return InMemoryTeamsClient()
    return request.getfixturevalue("sql_teams_client")


@pytest.fixture
def fake_teams_client() -> FakeTeamsClient:
    return FakeTeamsClient()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# ============================================================================
# Yahoo fixtures
# ============================================================================

@pytest.fixture
def yahoo_handler() -> dict:
    """
    Mutable response script for the mocked Yahoo API.

    Tests set ``status`` / ``json`` / ``exc``; sent requests land in ``requests``.
    """
    return {"status": 200, "json": {"fantasy_content": {"player": []}}, "exc": None, "requests": []}


@pytest.fixture
def yahoo_client(yahoo_handler: dict) -> YahooFantasyClient:
    def handle(request: httpx.Request) -> httpx.Response:
        yahoo_handler["requests"].append(request)
        if yahoo_handler["exc"] is not None:
            raise yahoo_handler["exc"]
        return httpx.Response(yahoo_handler["status"], json=yahoo_handler["json"])

    return YahooFantasyClient(access_token="test-token", transport=httpx.MockTransport(handle))


# ============================================================================
# Application fixtures
# ============================================================================

@pytest.fixture
def app_client(
    settings: Settings, yahoo_client: YahooFantasyClient, clock: FakeClock
) -> Generator[Callable[[TeamsClient], TestClient], None, None]:
    """Factory: a TestClient for an app wired to the given teams client."""
    clients: list[TestClient] = []

    def build(teams_client: TeamsClient) -> TestClient:
        services = Services(teams_client=teams_client, yahoo_client=yahoo_client, clock=clock)
        client = TestClient(create_app(services=services, settings=settings))
        clients.append(client)
        return client

    yield build

    for client in clients:
        client.close()


@pytest.fixture
def api(app_client, fake_teams_client: FakeTeamsClient) -> TestClient:
    """App backed by the scriptable fake client."""
    return app_client(fake_teams_client)
