"""
API route handlers.
"""

from filmtrack.api.routers import films, system

__all__ = ["films", "system"]
