"""
Team models exchanged over HTTP and with the storage clients.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from wolf_dynasty.core.errors import DecodeError


class Team(BaseModel):
    """A fantasy team as stored and returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class TeamPayload(BaseModel):
    """
    Request body for create and update.

    Only ``name`` is client-settable; ``id`` and timestamps sent by the
    client are ignored. A missing ``name`` decodes as the empty string.
    """

    name: str = ""

    @classmethod
    def decode(cls, body: bytes) -> "TeamPayload":
        """Parse a raw request body, raising DecodeError on any failure."""
        if not body.strip():
            raise DecodeError("request body is empty")

        try:
            return cls.model_validate_json(body)
        except ValidationError as e:
            err = e.errors()[0]
            loc = ".".join(str(part) for part in err["loc"])
            raise DecodeError(f"{loc}: {err['msg']}" if loc else err["msg"]) from e
