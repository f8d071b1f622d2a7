"""
FilmTrack record service client for the Streamlit UI.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import requests

from filmtrack.exceptions import FilmTrackError, NotFound, ServiceError, ValidationError

logger = logging.getLogger(__name__)


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:5000").rstrip("/")


def get_api_timeout() -> float:
    """Get request timeout in seconds from env or default."""
    return float(os.getenv("API_TIMEOUT", "10"))


def _error_from_response(r) -> FilmTrackError:
    """Turn an error response into the matching FilmTrack error."""
    try:
        body = r.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        body = {}
    message = body.get("message") or f"HTTP {r.status_code}"
    error = body.get("error")

    if r.status_code == 400:
        return ValidationError(message, error)
    if r.status_code == 404:
        return NotFound(message=message)
    return ServiceError(message, error, status_code=r.status_code)


class FilmApiClient:
    """
    Thin wrapper over the /records endpoints.

    Every method returns the decoded JSON body on success and raises a
    FilmTrackError otherwise. Nothing is retried.

    Args:
        base_url: Service root, defaults to API_BASE_URL
        timeout: Per-request timeout in seconds, defaults to API_TIMEOUT
        session: Object with a requests-style ``request`` method
            (requests.Session, or a FastAPI TestClient in tests)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session=None,
    ):
        self.base_url = (base_url or get_api_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else get_api_timeout()
        self.session = session if session is not None else requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            r = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise ServiceError("API not available", error=str(e)) from e

        if r.status_code >= 400:
            err = _error_from_response(r)
            logger.warning("%s %s -> %s: %s", method, url, r.status_code, err.message)
            raise err
        try:
            return r.json()
        except ValueError as e:
            logger.error("%s %s returned a non-JSON body", method, url)
            raise ServiceError("Invalid response from API", error=str(e)) from e

    def list_films(self) -> List[Dict[str, Any]]:
        """Get all films, newest first."""
        return self._request("GET", "/records")

    def get_film(self, film_id: str) -> Dict[str, Any]:
        """Get one film."""
        return self._request("GET", f"/records/{film_id}")

    def create_film(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Create a film from title, genre, year and optional flags."""
        return self._request("POST", "/records", json=fields)

    def update_film(self, film_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Update a film and return the record as stored."""
        return self._request("PUT", f"/records/{film_id}", json=fields)

    def delete_film(self, film_id: str) -> Dict[str, Any]:
        """Delete a film; returns {message, deletedRecord}."""
        return self._request("DELETE", f"/records/{film_id}")

    def health_check(self) -> Dict[str, Any]:
        """Check API health."""
        return self._request("GET", "/health")
