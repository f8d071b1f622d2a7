"""
FilmTrack Application Package.

This package contains the film record service (API and database layers),
the client-side view synchronizer, the Streamlit front-end, and utilities.
"""

__version__ = "1.0.0"
