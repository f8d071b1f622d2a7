"""
Client-side film list controller.

Keeps a cached copy of the whole collection, applies mutations through the
record service and derives the filtered view. The cache only ever changes
to reflect what the service returned: a failed request leaves it exactly as
it was.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from filmtrack.core.view.filters import (
    FilterMode,
    empty_message,
    filter_counts,
    filter_films,
)
from filmtrack.core.view.state import ViewState, ViewStatus, blank_form
from filmtrack.exceptions import FilmTrackError, NotFound, ValidationError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "genre", "year")
FILM_FIELDS = REQUIRED_FIELDS + ("watched", "watchlist")

ConfirmFn = Callable[[Dict[str, Any]], bool]


class FilmListController:
    """
    Owner of one film list view.

    The service is any object with ``list_films``, ``create_film``,
    ``update_film`` and ``delete_film`` (see FilmApiClient). Instances are
    independent; each holds its own ViewState.

    Usage:
        controller = FilmListController(FilmApiClient())
        controller.refresh()
        controller.create({"title": "Dune", "genre": "Sci-Fi", "year": 2021})
        controller.toggle_watched(film_id)
        controller.set_filter("seen")
        films = controller.visible()
    """

    def __init__(self, service, state: Optional[ViewState] = None):
        self.service = service
        self.state = state if state is not None else ViewState()

    @property
    def records(self) -> List[Dict[str, Any]]:
        return self.state.records

    def find(self, film_id: str) -> Optional[Dict[str, Any]]:
        """Cached record with this id, or None."""
        for film in self.state.records:
            if film["id"] == film_id:
                return film
        return None

    # ------------------------------------------------------------------
    # Reconciliation
    # ------------------------------------------------------------------

    def refresh(self) -> bool:
        """
        Replace the cache with the service's full list.

        On failure the cache is kept and the state moves to ERROR with the
        failure message.

        Returns:
            True if the list was fetched
        """
        try:
            records = self.service.list_films()
        except FilmTrackError as e:
            logger.warning("Refresh failed: %s", e.message)
            self.state.status = ViewStatus.ERROR
            self.state.error = e.message
            return False

        self.state.records = list(records)
        self.state.status = ViewStatus.READY
        self.state.error = None
        logger.debug("Refreshed %d films", len(records))
        return True

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def stage(self, **fields) -> Dict[str, Any]:
        """Update the pending creation form."""
        self.state.pending_form = {**self.state.pending_form, **fields}
        return self.state.pending_form

    def create(self, fields: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Create a film and put it at the top of the cache.

        Args:
            fields: Fields of the new film; the pending form when omitted.
                The pending form is reset only after it was submitted
                successfully.

        Returns:
            The film as created by the service

        Raises:
            ValidationError: If title, genre or year is missing; the service
                is not contacted
            FilmTrackError: If the service call fails; cache and form are kept
        """
        from_form = fields is None
        staged = self.state.pending_form if from_form else fields

        missing = [name for name in REQUIRED_FIELDS if not staged.get(name)]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        payload = {name: staged[name] for name in FILM_FIELDS if name in staged}
        created = self.service.create_film(payload)

        self.state.records = [created] + self.state.records
        if from_form:
            self.state.pending_form = blank_form()
        logger.info("Added film %s (%s)", created["id"], created["title"])
        return created

    def update(self, film_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply changes to a film.

        The cached record is merged with ``changes`` and the merged record is
        sent in full. The cache entry is then replaced by what the service
        returned, not by the local merge.

        Raises:
            NotFound: If the film is not in the cache; the service is not
                contacted
            FilmTrackError: If the service call fails; the cache is kept
        """
        current = self.find(film_id)
        if current is None:
            raise NotFound(film_id)

        merged = {**current, **changes}
        updated = self.service.update_film(film_id, merged)

        self.state.records = [
            updated if film["id"] == film_id else film
            for film in self.state.records
        ]
        logger.debug("Updated film %s: %s", film_id, sorted(changes))
        return updated

    def toggle_watched(self, film_id: str) -> Dict[str, Any]:
        current = self.find(film_id)
        if current is None:
            raise NotFound(film_id)
        return self.update(film_id, {"watched": not current["watched"]})

    def toggle_watchlist(self, film_id: str) -> Dict[str, Any]:
        current = self.find(film_id)
        if current is None:
            raise NotFound(film_id)
        return self.update(film_id, {"watchlist": not current["watchlist"]})

    def delete(self, film_id: str, confirm: ConfirmFn) -> bool:
        """
        Delete a film once the caller confirms.

        Args:
            film_id: Film to delete
            confirm: Called with the cached record (or ``{"id": film_id}``
                when it is not cached); a falsy result cancels the delete

        Returns:
            True if the film was deleted, False if the caller declined

        Raises:
            FilmTrackError: If the service call fails (NotFound for an
                already deleted film); the cache is kept
        """
        film = self.find(film_id) or {"id": film_id}
        if not confirm(film):
            logger.debug("Delete of %s cancelled", film_id)
            return False

        self.service.delete_film(film_id)

        self.state.records = [f for f in self.state.records if f["id"] != film_id]
        logger.info("Deleted film %s", film_id)
        return True

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------

    def set_filter(self, mode: FilterMode) -> None:
        self.state.filter_mode = FilterMode(mode)

    def set_search(self, query: str) -> None:
        self.state.search_query = query or ""

    def visible(self) -> List[Dict[str, Any]]:
        """Films matching the current filter mode and search query."""
        return filter_films(
            self.state.records,
            self.state.filter_mode,
            self.state.search_query,
        )

    def counts(self) -> Dict[FilterMode, int]:
        return filter_counts(self.state.records)

    def empty_message(self) -> str:
        return empty_message(self.state.filter_mode, self.state.search_query)
