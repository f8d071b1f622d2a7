"""
SQLAlchemy ORM models for the FilmTrack database.

This module defines the films table, the single collection of tracked
film records.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Integer, String, Text, Index, TIMESTAMP
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


def new_film_id() -> str:
    """Generate an opaque film identifier."""
    return uuid.uuid4().hex


def utcnow() -> datetime:
    """Naive UTC creation timestamp (SQLite stores no offset)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Film(Base):
    """
    Film table storing one tracked film per row.

    Attributes:
        id: Primary key, opaque identifier assigned on creation
        title: Film title (required)
        genre: Film genre (required)
        year: Release year (required)
        watched: Whether the film has been seen
        watchlist: Whether the film is on the watchlist
        created_at: Timestamp when record was created, default sort key
        seq: Insertion counter, breaks ties between equal timestamps
    """
    __tablename__ = 'films'

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_film_id)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    genre: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    watched: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    watchlist: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        default=utcnow
    )
    seq: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index('idx_films_created_at', 'created_at'),
    )

    def __repr__(self) -> str:
        return f"<Film(id='{self.id}', title='{self.title}', year={self.year})>"
