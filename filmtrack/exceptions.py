"""
Error taxonomy shared by the record service and its client.

Each error carries the HTTP status it maps to, so the API can translate it
into a response and the API client can translate a response back into it.
"""

from fastapi import status


class FilmTrackError(Exception):
    """Base class for all FilmTrack errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None, error: str | None = None):
        if message:
            self.message = message
        self.error = error
        super().__init__(self.message)

    def to_payload(self) -> dict:
        """Error response body: {message, error?}."""
        payload = {"message": self.message}
        if self.error:
            payload["error"] = self.error
        return payload


class ValidationError(FilmTrackError):
    """Missing or malformed required fields."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Title, genre and year are required"


class NotFound(FilmTrackError):
    """Unknown film id."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "Film not found"

    def __init__(self, film_id: str | None = None, message: str | None = None):
        self.film_id = film_id
        super().__init__(message)


class StoreFailure(FilmTrackError):
    """The underlying storage is unavailable or errored."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Storage error"


class ServiceError(FilmTrackError):
    """
    Failure reported by, or on the way to, the record service.

    Raised by the API client for statuses that have no dedicated class and
    for transport errors (connection refused, timeout), where status_code
    is None.
    """

    def __init__(
        self,
        message: str | None = None,
        error: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message, error)
        self.status_code = status_code
