"""
Teams API endpoints.
"""

import uuid
from datetime import datetime
from typing import Callable, TypeVar

from fastapi import Request, Response, status
from starlette.concurrency import run_in_threadpool

from wolf_dynasty.api.responses import write_json
from wolf_dynasty.core.clock import utc_now
from wolf_dynasty.core.errors import StorageError, WolfDynastyError
from wolf_dynasty.schemas import Team, TeamPayload
from wolf_dynasty.services.teams import TeamsClient

T = TypeVar("T")


class TeamsHandler:
    """
    Maps team requests onto a ``TeamsClient``.

    Each request makes at most one read and one write against the client.
    Errors are raised as ``WolfDynastyError`` subclasses and rendered by the
    application's exception handlers.
    """

    def __init__(self, client: TeamsClient, clock: Callable[[], datetime] = utc_now):
        self.client = client
        self.clock = clock

    async def _call(self, fn: Callable[..., T], *args) -> T:
        """Run a blocking client call in the worker pool."""
        try:
            return await run_in_threadpool(fn, *args)
        except WolfDynastyError:
            raise
        except Exception as e:
            # Contract violation by the backend: still answer with a 500
            raise StorageError(str(e) or e.__class__.__name__) from e

    async def get_teams(self, request: Request) -> Response:
        """List all teams."""
        teams = await self._call(self.client.list_teams)
        return write_json(teams, status.HTTP_200_OK)

    async def create_team(self, request: Request) -> Response:
        """Create a team. The id and both timestamps are assigned here."""
        payload = TeamPayload.decode(await request.body())

        now = self.clock()
        team = Team(
            id=str(uuid.uuid4()),
            name=payload.name,
            created_at=now,
            updated_at=now,
        )

        created = await self._call(self.client.create_team, team)
        return write_json(created, status.HTTP_201_CREATED)

    async def update_team(self, request: Request, guid: str) -> Response:
        """Rename a team. ``id`` and ``created_at`` are preserved."""
        payload = TeamPayload.decode(await request.body())

        team = await self._call(self.client.get_team, guid)

        # updated_at never precedes created_at, even if the clock stepped back
        team.updated_at = max(self.clock(), team.created_at)
        team.name = payload.name

        updated = await self._call(self.client.update_team, team)
        return write_json(updated, status.HTTP_200_OK)

    async def delete_team(self, request: Request, guid: str) -> Response:
        """Hard-delete a team."""
        team = await self._call(self.client.get_team, guid)
        await self._call(self.client.delete_team, team)
        return write_json(None, status.HTTP_204_NO_CONTENT)
