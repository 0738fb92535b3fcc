"""
SQLAlchemy-backed teams client.
"""

from contextlib import contextmanager
from typing import Iterator

from loguru import logger
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from wolf_dynasty.core.errors import StorageError, TeamNotFoundError
from wolf_dynasty.models.database import TeamRecord
from wolf_dynasty.schemas import Team

from .client import TeamsClient


class SQLTeamsClient(TeamsClient):
    """
    Teams client over a relational database.

    Every call runs in its own session and transaction, so one instance can be
    shared by all request workers; the engine's pool does the rest.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    @contextmanager
    def _transaction(self) -> Iterator[Session]:
        try:
            with self.session_factory() as session, session.begin():
                yield session
        except SQLAlchemyError as e:
            logger.debug(f"Database error: {e}")
            raise StorageError(str(e)) from e

    def list_teams(self) -> list[Team]:
        with self._transaction() as session:
            rows = session.scalars(
                select(TeamRecord).order_by(TeamRecord.created_at, TeamRecord.id)
            ).all()
            return [Team.model_validate(row) for row in rows]

    def create_team(self, team: Team) -> Team:
        with self._transaction() as session:
            row = TeamRecord(
                id=team.id,
                name=team.name,
                created_at=team.created_at,
                updated_at=team.updated_at,
            )
            session.add(row)
            session.flush()
            # Read back what the store kept (e.g. timestamp precision)
            session.refresh(row)
            return Team.model_validate(row)

    def get_team(self, team_id: str) -> Team:
        with self._transaction() as session:
            row = session.get(TeamRecord, team_id)
            if row is None:
                raise TeamNotFoundError(team_id)
            return Team.model_validate(row)

    def update_team(self, team: Team) -> Team:
        with self._transaction() as session:
            row = session.get(TeamRecord, team.id)
            if row is None:
                # Deleted between the caller's fetch and this write
                raise TeamNotFoundError(team.id)
            row.name = team.name
            row.updated_at = team.updated_at
            session.flush()
            session.refresh(row)
            return Team.model_validate(row)

    def delete_team(self, team: Team) -> None:
        with self._transaction() as session:
            session.execute(delete(TeamRecord).where(TeamRecord.id == team.id))
