"""
Session state helpers for Streamlit.

The FilmListController lives in st.session_state so that its cached list,
filter and search survive Streamlit reruns.
"""

import streamlit as st

from filmtrack.core.view import FilmListController
from filmtrack.ui.utils.api_client import FilmApiClient


def get_controller() -> FilmListController:
    """Get the film list controller for this browser session."""
    return st.session_state["controller"]


def get_pending_delete() -> str | None:
    """Film id waiting for delete confirmation."""
    return st.session_state.get("pending_delete")


def set_pending_delete(film_id: str | None) -> None:
    """Ask for (or clear) delete confirmation of a film."""
    st.session_state["pending_delete"] = film_id


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if "controller" not in st.session_state:
        st.session_state["controller"] = FilmListController(FilmApiClient())
    if "show_form" not in st.session_state:
        st.session_state["show_form"] = False
    if "pending_delete" not in st.session_state:
        st.session_state["pending_delete"] = None
