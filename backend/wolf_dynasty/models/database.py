"""
Database models for the Wolf Dynasty API.
SQLAlchemy ORM models for the relational store.
"""

from sqlalchemy import Column, String, DateTime
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import DeclarativeBase


Timestamp = DateTime(timezone=True).with_variant(mysql.DATETIME(fsp=6), "mysql")


class Base(DeclarativeBase):
    pass


class TeamRecord(Base):
    """Fantasy teams"""

    __tablename__ = "teams"

    id = Column(String(36), primary_key=True)  # uuid4, assigned by the API
    name = Column(String(255), nullable=False)

    # Stored in UTC; SQLite and MySQL hand them back without tzinfo.
    # MySQL DATETIME defaults to whole seconds, keep microseconds.
    created_at = Column(Timestamp, nullable=False)
    updated_at = Column(Timestamp, nullable=False, index=True)
