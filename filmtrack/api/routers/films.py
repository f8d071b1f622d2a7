"""
Film record API endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from filmtrack.api.dependencies import get_db
from filmtrack.api.models.film import (
    ErrorResponse,
    FilmCreate,
    FilmDeleted,
    FilmResponse,
    FilmUpdate,
)
from filmtrack.database import crud

router = APIRouter(
    prefix="/records",
    tags=["films"],
    responses={500: {"model": ErrorResponse}},
)


@router.get("", response_model=list[FilmResponse])
def list_films(db: Session = Depends(get_db)):
    """List all films, newest first."""
    return crud.list_films(db)


@router.get("/{film_id}", response_model=FilmResponse, responses={404: {"model": ErrorResponse}})
def get_film(film_id: str, db: Session = Depends(get_db)):
    """Get film details by ID."""
    return crud.get_film(db, film_id)


@router.post(
    "",
    response_model=FilmResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_film(film_in: FilmCreate, db: Session = Depends(get_db)):
    """Create a film. Title, genre and year are required."""
    return crud.create_film(db, **film_in.model_dump())


@router.put(
    "/{film_id}",
    response_model=FilmResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_film(film_id: str, film_in: FilmUpdate, db: Session = Depends(get_db)):
    """Update any subset of a film's fields and return the merged record."""
    return crud.update_film(db, film_id, **film_in.model_dump(exclude_unset=True))


@router.delete("/{film_id}", response_model=FilmDeleted, responses={404: {"model": ErrorResponse}})
def delete_film(film_id: str, db: Session = Depends(get_db)):
    """Delete a film and return it in the confirmation."""
    film = crud.delete_film(db, film_id)
    return FilmDeleted(
        message="Film deleted",
        deleted_record=FilmResponse.model_validate(film),
    )
