from .team import Team, TeamPayload

__all__ = ["Team", "TeamPayload"]
