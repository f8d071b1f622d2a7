"""
CRUD operations for the Film model.

This module is the collection store: every read and write of film records
goes through these functions. Storage-layer errors are rolled back and
re-raised as StoreFailure.
"""

import logging
from contextlib import contextmanager
from typing import List, Any, Iterator, Optional

from sqlalchemy import func, inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from filmtrack.database.models import Film
from filmtrack.exceptions import NotFound, StoreFailure, ValidationError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('title', 'genre', 'year')
FLAG_FIELDS = ('watched', 'watchlist')
EDITABLE_FIELDS = REQUIRED_FIELDS + FLAG_FIELDS


@contextmanager
def _store_errors(session: Session) -> Iterator[None]:
    """Roll back and translate SQLAlchemy errors into StoreFailure."""
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Store operation failed")
        raise StoreFailure(error=str(e)) from e


def _check_field(name: str, value: Any) -> None:
    """
    Validate a single editable field value.

    Raises:
        ValidationError: If a required field is empty or a value has the wrong type
    """
    if name in REQUIRED_FIELDS and not value:
        raise ValidationError(f"{name.capitalize()} is required")
    if name == 'year':
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError("Year must be an integer")
    elif name in FLAG_FIELDS:
        if not isinstance(value, bool):
            raise ValidationError(f"{name.capitalize()} must be a boolean")
    elif not isinstance(value, str):
        raise ValidationError(f"{name.capitalize()} must be a string")


def _snapshot(film: Film) -> Film:
    """Copy a film into a transient instance detached from any session."""
    return Film(**{
        attr.key: getattr(film, attr.key)
        for attr in inspect(Film).column_attrs
    })


def list_films(session: Session) -> List[Film]:
    """
    Get all films, newest first.

    Args:
        session: Database session

    Returns:
        List of Film objects ordered by creation time descending
    """
    with _store_errors(session):
        return session.query(Film).order_by(
            Film.created_at.desc(), Film.seq.desc()
        ).all()


def get_film(session: Session, film_id: str) -> Film:
    """
    Get a film by ID.

    Args:
        session: Database session
        film_id: Film ID

    Returns:
        Film object

    Raises:
        NotFound: If no film has this ID
    """
    with _store_errors(session):
        film = session.get(Film, film_id)
    if film is None:
        raise NotFound(film_id)
    return film


def count_films(session: Session) -> int:
    """Get total count of films."""
    with _store_errors(session):
        return session.query(func.count(Film.id)).scalar()


def create_film(
    session: Session,
    title: Optional[str] = None,
    genre: Optional[str] = None,
    year: Optional[int] = None,
    watched: Optional[bool] = None,
    watchlist: Optional[bool] = None,
) -> Film:
    """
    Create a new film.

    Args:
        session: Database session
        title: Film title
        genre: Film genre
        year: Release year
        watched: Seen flag, defaults to False
        watchlist: Watchlist flag, defaults to False

    Returns:
        Created Film object with its generated id and creation timestamp

    Raises:
        ValidationError: If title, genre or year is missing or malformed
    """
    if not title or not genre or not year:
        raise ValidationError()

    fields = {
        'title': title,
        'genre': genre,
        'year': year,
        'watched': watched or False,
        'watchlist': watchlist or False,
    }
    for name, value in fields.items():
        _check_field(name, value)

    with _store_errors(session):
        last_seq = session.query(func.coalesce(func.max(Film.seq), 0)).scalar()
        film = Film(seq=last_seq + 1, **fields)
        session.add(film)
        session.commit()
        session.refresh(film)

    logger.info("Created film %s (%s, %s)", film.id, film.title, film.year)
    return film


def update_film(session: Session, film_id: str, **changes) -> Film:
    """
    Merge changes into an existing film.

    Fields not supplied are left unchanged.

    Args:
        session: Database session
        film_id: Film ID
        **changes: Fields to update (title, genre, year, watched, watchlist)

    Returns:
        Updated Film object

    Raises:
        NotFound: If no film has this ID
        ValidationError: If a field is unknown or its value is invalid
    """
    unknown = set(changes) - set(EDITABLE_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")
    for name, value in changes.items():
        _check_field(name, value)

    film = get_film(session, film_id)
    with _store_errors(session):
        for key, value in changes.items():
            setattr(film, key, value)
        session.commit()
        session.refresh(film)

    logger.info("Updated film %s: %s", film_id, sorted(changes))
    return film


def delete_film(session: Session, film_id: str) -> Film:
    """
    Delete a film.

    Args:
        session: Database session
        film_id: Film ID

    Returns:
        Detached copy of the deleted Film

    Raises:
        NotFound: If no film has this ID
    """
    film = get_film(session, film_id)
    deleted = _snapshot(film)
    with _store_errors(session):
        session.delete(film)
        session.commit()

    logger.info("Deleted film %s", film_id)
    return deleted

