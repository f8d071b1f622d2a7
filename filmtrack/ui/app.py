"""
Streamlit single-page front-end for FilmTrack.

Run: streamlit run filmtrack/ui/app.py --server.port 8501
"""

import streamlit as st

from filmtrack.core.view import FilterMode, ViewStatus
from filmtrack.exceptions import FilmTrackError
from filmtrack.ui.components.film_card import render_film_card
from filmtrack.ui.components.film_form import render_film_form
from filmtrack.ui.utils.session_state import (
    get_controller,
    get_pending_delete,
    init_session_state,
    set_pending_delete,
)
from filmtrack.utils.logging_config import configure_ui_logging, get_logger

logger = get_logger(__name__)

FILTER_LABELS = {
    FilterMode.ALL: "All",
    FilterMode.WATCHLIST: "🔖 Watchlist",
    FilterMode.SEEN: "✔️ Seen",
    FilterMode.UNSEEN: "👁 To watch",
}

st.set_page_config(
    page_title="FilmTrack",
    page_icon="📽️",
    layout="wide",
)

if "logging_configured" not in st.session_state:
    configure_ui_logging()
    st.session_state["logging_configured"] = True

init_session_state()
controller = get_controller()

# Check API health
with st.sidebar:
    try:
        health = controller.service.health_check()
        if health.get("status") == "healthy":
            st.success(f"API connected ({health.get('films', 0)} films)")
        else:
            st.warning(f"API database unavailable: {health.get('database')}")
    except FilmTrackError as e:
        st.error(f"API not available: {e.message}")
        st.info("Start the API with: uvicorn filmtrack.api.main:app --port 5000")


def _flash(message: str) -> None:
    st.session_state["flash_error"] = message


def _run(action, *args) -> None:
    """Run a controller mutation, keeping its failure for the next render."""
    try:
        action(*args)
    except FilmTrackError as e:
        logger.warning("Action %s failed: %s", action.__name__, e.message)
        _flash(e.message)


def handle_toggle_watched(film_id: str) -> None:
    _run(controller.toggle_watched, film_id)


def handle_toggle_watchlist(film_id: str) -> None:
    _run(controller.toggle_watchlist, film_id)


def handle_delete_request(film_id: str) -> None:
    set_pending_delete(film_id)


def handle_delete_answer(confirmed: bool) -> None:
    film_id = get_pending_delete()
    set_pending_delete(None)
    if film_id:
        _run(controller.delete, film_id, lambda film: confirmed)


# Header
col1, col2 = st.columns([4, 1])
with col1:
    st.title("📽️ FilmTrack")
    st.caption("Manage your film collection")
with col2:
    if st.button("+ Add a film", use_container_width=True):
        st.session_state["show_form"] = not st.session_state["show_form"]

flash = st.session_state.pop("flash_error", None)
if flash:
    st.error(flash)

if controller.state.status is ViewStatus.LOADING:
    with st.spinner("Loading..."):
        controller.refresh()

# Add form
if st.session_state["show_form"]:
    form_data = render_film_form(controller.state.pending_form)
    if form_data:
        controller.stage(**form_data)
        try:
            created = controller.create()
            st.session_state["show_form"] = False
            st.success(f"Added {created['title']}")
            st.rerun()
        except FilmTrackError as e:
            st.error(f"Could not add film: {e.message}")

# Search and filters
query = st.text_input(
    "Search",
    value=controller.state.search_query,
    placeholder="Search a film...",
    label_visibility="collapsed",
)
controller.set_search(query)

counts = controller.counts()
filter_cols = st.columns(len(FilterMode))
for col, mode in zip(filter_cols, FilterMode):
    with col:
        active = controller.state.filter_mode is mode
        if st.button(
            f"{FILTER_LABELS[mode]} ({counts[mode]})",
            key=f"filter_{mode.value}",
            type="primary" if active else "secondary",
            use_container_width=True,
        ):
            controller.set_filter(mode)
            st.rerun()

if st.button("🔄 Refresh"):
    controller.refresh()
    st.rerun()

if controller.state.status is ViewStatus.ERROR:
    st.error(f"⚠️ Error: {controller.state.error}")

# Delete confirmation
pending = get_pending_delete()
if pending:
    film = controller.find(pending)
    title = film["title"] if film else pending
    st.warning(f"Delete {title}?")
    c1, c2 = st.columns(2)
    with c1:
        st.button("Delete", on_click=handle_delete_answer, args=(True,), use_container_width=True)
    with c2:
        st.button("Cancel", on_click=handle_delete_answer, args=(False,), use_container_width=True)

# Film list
films = controller.visible()
if not films:
    st.info(f"🎬 {controller.empty_message()}")
else:
    grid = st.columns(3)
    for i, film in enumerate(films):
        with grid[i % 3]:
            render_film_card(
                film,
                on_toggle_watched=handle_toggle_watched,
                on_toggle_watchlist=handle_toggle_watchlist,
                on_delete=handle_delete_request,
            )
