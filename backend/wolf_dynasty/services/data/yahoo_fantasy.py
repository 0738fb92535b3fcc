"""
Yahoo Fantasy Sports API Client
Documentation: https://developer.yahoo.com/fantasysports/guide/

Read-only: only player metadata is fetched, and the payload is passed
through untouched.
"""

from typing import Any

import httpx
from loguru import logger
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from wolf_dynasty.core.errors import PlayerNotFoundError, UpstreamError


class YahooFantasyClient:
    """Client for Yahoo Fantasy Sports v2."""

    BASE_URL = "https://fantasysports.yahooapis.com/fantasy/v2"

    def __init__(
        self,
        access_token: str,
        base_url: str = BASE_URL,
        timeout: float = 15.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.access_token = access_token
        self.client = httpx.Client(
            base_url=base_url,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=timeout,
            transport=transport,
        )

    @retry(
        retry=retry_if_exception_type(httpx.TransportError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, max=2),
        reraise=True,
    )
    def _get(self, endpoint: str, params: dict | None = None) -> httpx.Response:
        return self.client.get(endpoint, params=params)

    def _request(self, endpoint: str, params: dict | None = None) -> Any:
        """Make a request and decode the JSON body."""
        if not self.access_token:
            raise UpstreamError("Yahoo access token is not configured")

        try:
            response = self._get(endpoint, params)
        except httpx.HTTPError as e:
            logger.debug(f"Yahoo {endpoint} failed: {e}")
            raise UpstreamError(f"Yahoo request failed: {e}") from e

        logger.debug(f"Yahoo {endpoint} - {response.status_code}")
        response.raise_for_status()

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(f"Yahoo returned invalid JSON: {e}") from e

    def get_player_metadata(self, player_key: str) -> Any:
        """
        Get a player's stats metadata.

        Args:
            player_key: Yahoo player key (e.g. "nfl.p.30977")
        """
        try:
            return self._request(
                f"/player/{player_key}/stats/metadata", params={"format": "json"}
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise PlayerNotFoundError(player_key) from e
            raise UpstreamError(
                f"Yahoo returned {e.response.status_code} for player '{player_key}'"
            ) from e

    def close(self) -> None:
        self.client.close()
