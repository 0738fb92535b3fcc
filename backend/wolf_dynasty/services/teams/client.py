"""
Storage contract for team records.

The HTTP layer only talks to this interface, so backends can be swapped
without touching the handlers.
"""

from abc import ABC, abstractmethod

from wolf_dynasty.schemas import Team


class TeamsClient(ABC):
    """
    CRUD operations for teams.

    Implementations raise ``TeamNotFoundError`` when a record is missing and
    ``StorageError`` for every other backend failure. Nothing else escapes.
    """

    @abstractmethod
    def list_teams(self) -> list[Team]:
        """Return every team, oldest first. An empty store yields ``[]``."""

    @abstractmethod
    def create_team(self, team: Team) -> Team:
        """Persist a fully populated team and return the stored copy."""

    @abstractmethod
    def get_team(self, team_id: str) -> Team:
        """Fetch one team by id."""

    @abstractmethod
    def update_team(self, team: Team) -> Team:
        """
        Overwrite the mutable fields of the record matching ``team.id``.

        Callers fetch and merge first; last write wins.
        """

    @abstractmethod
    def delete_team(self, team: Team) -> None:
        """Hard-delete the record matching ``team.id``. Absent records are a no-op."""
