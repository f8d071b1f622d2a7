"""
Client-side view of the film collection: cached list, mutations through the
record service and filtered views.
"""

from filmtrack.core.view.filters import (
    FilterMode,
    filter_films,
    filter_counts,
    matches_mode,
    matches_query,
)
from filmtrack.core.view.state import ViewState, ViewStatus
from filmtrack.core.view.controller import FilmListController

__all__ = [
    "FilterMode",
    "filter_films",
    "filter_counts",
    "matches_mode",
    "matches_query",
    "ViewState",
    "ViewStatus",
    "FilmListController",
]
