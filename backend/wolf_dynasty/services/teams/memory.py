"""
In-process teams client.

Used by the test-suite and for running the API without a database
(``DATABASE_URL=memory://``).
"""

import threading

from wolf_dynasty.core.errors import TeamNotFoundError
from wolf_dynasty.schemas import Team

from .client import TeamsClient


class InMemoryTeamsClient(TeamsClient):
    """Dict-backed store. Returns copies so callers never alias stored state."""

    def __init__(self, teams: list[Team] | None = None):
        self._teams: dict[str, Team] = {}
        self._lock = threading.Lock()
        for team in teams or []:
            self._teams[team.id] = team.model_copy()

    def list_teams(self) -> list[Team]:
        with self._lock:
            teams = sorted(self._teams.values(), key=lambda t: (t.created_at, t.id))
            return [t.model_copy() for t in teams]

    def create_team(self, team: Team) -> Team:
        with self._lock:
            self._teams[team.id] = team.model_copy()
            return team.model_copy()

    def get_team(self, team_id: str) -> Team:
        with self._lock:
            team = self._teams.get(team_id)
            if team is None:
                raise TeamNotFoundError(team_id)
            return team.model_copy()

    def update_team(self, team: Team) -> Team:
        with self._lock:
            if team.id not in self._teams:
                raise TeamNotFoundError(team.id)
            self._teams[team.id] = team.model_copy()
            return team.model_copy()

    def delete_team(self, team: Team) -> None:
        with self._lock:
            self._teams.pop(team.id, None)
