"""
Pydantic schemas for API request/response validation.
"""

from filmtrack.api.models.film import (
    FilmCreate,
    FilmUpdate,
    FilmResponse,
    FilmDeleted,
    ErrorResponse,
)

__all__ = [
    "FilmCreate",
    "FilmUpdate",
    "FilmResponse",
    "FilmDeleted",
    "ErrorResponse",
]
