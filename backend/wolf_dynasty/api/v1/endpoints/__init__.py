"""API v1 Endpoints."""
from . import health, player, teams

__all__ = [
    "health",
    "player",
    "teams",
]
