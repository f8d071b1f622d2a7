"""
Derived views over the cached film list.

Every function here is pure: it reads the records it is given and returns
a new list or dict, never mutating its input.
"""

from enum import Enum
from typing import Any, Callable, Dict, List


class FilterMode(str, Enum):
    """Which part of the collection the list shows."""

    ALL = "all"
    WATCHLIST = "watchlist"
    SEEN = "seen"
    UNSEEN = "unseen"


_PREDICATES: Dict[FilterMode, Callable[[Dict[str, Any]], bool]] = {
    FilterMode.ALL: lambda film: True,
    FilterMode.WATCHLIST: lambda film: bool(film["watchlist"]),
    FilterMode.SEEN: lambda film: bool(film["watched"]),
    FilterMode.UNSEEN: lambda film: not film["watched"],
}


def matches_mode(film: Dict[str, Any], mode: FilterMode) -> bool:
    """Check a film against a filter mode's predicate."""
    return _PREDICATES[FilterMode(mode)](film)


def matches_query(film: Dict[str, Any], query: str) -> bool:
    """
    Case-insensitive substring match on title or genre.

    An empty query matches every film.
    """
    if not query:
        return True
    needle = query.lower()
    return needle in film["title"].lower() or needle in film["genre"].lower()


def filter_films(
    records: List[Dict[str, Any]],
    mode: FilterMode = FilterMode.ALL,
    query: str = "",
) -> List[Dict[str, Any]]:
    """
    Compute the visible subset of the cached records.

    The filter mode is applied first, then the search query. Order is
    preserved from ``records``.

    Args:
        records: Cached film list, newest first
        mode: Filter mode (enum member or its string value)
        query: Free-text search, matched against title and genre

    Returns:
        New list holding the matching records
    """
    mode = FilterMode(mode)
    return [
        film for film in records
        if matches_mode(film, mode) and matches_query(film, query)
    ]


def filter_counts(records: List[Dict[str, Any]]) -> Dict[FilterMode, int]:
    """Number of records each filter mode would show, ignoring search."""
    return {
        mode: sum(1 for film in records if matches_mode(film, mode))
        for mode in FilterMode
    }


def empty_message(mode: FilterMode, query: str) -> str:
    """Text shown when the derived view is empty."""
    if query or FilterMode(mode) is not FilterMode.ALL:
        return "No films found"
    return "No films yet. Add one to get started!"
