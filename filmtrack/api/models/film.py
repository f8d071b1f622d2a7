"""
Pydantic schemas for Film API.

Required fields are optional at the schema level: presence is checked by
the store so that a missing field is reported as 400, not 422.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class FilmCreate(BaseModel):
    """Request body for creating a film."""

    title: str | None = None
    genre: str | None = None
    year: int | None = None
    watched: bool | None = None
    watchlist: bool | None = None


class FilmUpdate(BaseModel):
    """Request body for updating a film (any subset of fields)."""

    title: str | None = None
    genre: str | None = None
    year: int | None = None
    watched: bool | None = None
    watchlist: bool | None = None


class FilmResponse(BaseModel):
    """Response model for a single film."""

    id: str
    title: str
    genre: str
    year: int
    watched: bool
    watchlist: bool
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class FilmDeleted(BaseModel):
    """Confirmation returned by DELETE."""

    message: str
    deleted_record: FilmResponse = Field(..., alias="deletedRecord")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    message: str
    error: str | None = None
