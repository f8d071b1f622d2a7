"""
Film display card component.
"""

from typing import Callable

import streamlit as st


def render_film_card(
    film: dict,
    on_toggle_watched: Callable[[str], None],
    on_toggle_watchlist: Callable[[str], None],
    on_delete: Callable[[str], None],
) -> None:
    """
    Render a film card with its action buttons.

    Args:
        film: Film record as returned by the API
        on_toggle_watched: Callback(film_id) for the seen button
        on_toggle_watchlist: Callback(film_id) for the watchlist button
        on_delete: Callback(film_id) for the delete button
    """
    film_id = film["id"]
    with st.container(border=True):
        col1, col2 = st.columns([4, 1])
        with col1:
            st.markdown(f"**{film['title']}**")
            st.caption(f"{film['genre']} | {film['year']}")
        with col2:
            badges = []
            if film["watched"]:
                badges.append("✔️")
            if film["watchlist"]:
                badges.append("🔖")
            st.write(" ".join(badges))

        a1, a2, a3 = st.columns(3)
        with a1:
            st.button(
                "Seen" if film["watched"] else "Mark seen",
                key=f"watched_{film_id}",
                type="primary" if film["watched"] else "secondary",
                on_click=on_toggle_watched,
                args=(film_id,),
                use_container_width=True,
            )
        with a2:
            st.button(
                "On list" if film["watchlist"] else "Watchlist",
                key=f"watchlist_{film_id}",
                type="primary" if film["watchlist"] else "secondary",
                on_click=on_toggle_watchlist,
                args=(film_id,),
                use_container_width=True,
            )
        with a3:
            st.button(
                "🗑️",
                key=f"delete_{film_id}",
                on_click=on_delete,
                args=(film_id,),
                use_container_width=True,
            )
