"""
View state owned by a single FilmListController.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from filmtrack.core.view.filters import FilterMode


class ViewStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


def blank_form() -> Dict[str, Any]:
    """Empty creation form, year pre-filled with the current year."""
    return {"title": "", "genre": "", "year": date.today().year}


@dataclass
class ViewState:
    """
    Everything the film list view needs to render.

    Attributes:
        records: Full film list as last received from the service, newest first
        filter_mode: Active filter
        search_query: Active free-text search
        pending_form: Fields staged for the next create
        status: Loading until the first successful refresh
        error: Message of the last failed refresh, None when ready
    """

    records: List[Dict[str, Any]] = field(default_factory=list)
    filter_mode: FilterMode = FilterMode.ALL
    search_query: str = ""
    pending_form: Dict[str, Any] = field(default_factory=blank_form)
    status: ViewStatus = ViewStatus.LOADING
    error: Optional[str] = None
