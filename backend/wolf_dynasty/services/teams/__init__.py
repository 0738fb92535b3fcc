from .client import TeamsClient
from .sql import SQLTeamsClient
from .memory import InMemoryTeamsClient

__all__ = [
    "TeamsClient",
    "SQLTeamsClient",
    "InMemoryTeamsClient",
]
