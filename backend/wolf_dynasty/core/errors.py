"""
Error taxonomy shared by the storage adapters and the HTTP layer.

Every error carries the HTTP status it maps to, so handlers can raise and the
application-level exception handler renders the JSON error body.
"""


class WolfDynastyError(Exception):
    """Base class for all errors rendered as ``{"error": message}``."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class DecodeError(WolfDynastyError):
    """Request body was empty, malformed, or of the wrong shape."""

    status_code = 400


class NotFoundError(WolfDynastyError):
    status_code = 404


class TeamNotFoundError(NotFoundError):
    """No team matches the given guid."""

    def __init__(self, team_id: str):
        super().__init__(f"No team found for guid '{team_id}'")
        self.team_id = team_id


class PlayerNotFoundError(NotFoundError):
    def __init__(self, player_key: str):
        super().__init__(f"No player found for key '{player_key}'")
        self.player_key = player_key


class StorageError(WolfDynastyError):
    """Any persistence failure other than a missing record."""

    status_code = 500


class UpstreamError(WolfDynastyError):
    """The fantasy-sports provider failed or returned garbage."""

    status_code = 502
