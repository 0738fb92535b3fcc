"""
Player metadata endpoints (Yahoo Fantasy pass-through).
"""

from fastapi import Response, status
from starlette.concurrency import run_in_threadpool

from wolf_dynasty.api.responses import write_json
from wolf_dynasty.services.data.yahoo_fantasy import YahooFantasyClient


class PlayerHandler:
    def __init__(self, client: YahooFantasyClient):
        self.client = client

    async def get_player(self, player_key: str) -> Response:
        """Return Yahoo's stats metadata for a player, unmodified."""
        player = await run_in_threadpool(self.client.get_player_metadata, player_key)
        return write_json(player, status.HTTP_200_OK)
