"""
Add-film form component.
"""

import streamlit as st


def render_film_form(initial_data: dict) -> dict | None:
    """
    Render the new-film form.

    Args:
        initial_data: Pre-fill form with this data (title, genre, year)

    Returns:
        Form data dict if submitted, else None.
    """
    with st.form("new_film_form"):
        st.subheader("New film")
        title = st.text_input("Title", value=initial_data.get("title", ""), placeholder="e.g. Inception")
        col1, col2 = st.columns(2)
        with col1:
            genre = st.text_input("Genre", value=initial_data.get("genre", ""), placeholder="e.g. Sci-Fi")
        with col2:
            year = st.number_input(
                "Year",
                min_value=1870,
                max_value=2100,
                value=int(initial_data.get("year") or 2000),
                step=1,
            )
        submitted = st.form_submit_button("Add")
        if submitted:
            return {
                "title": title.strip(),
                "genre": genre.strip(),
                "year": int(year),
            }
    return None
