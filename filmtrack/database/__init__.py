"""
Database module for FilmTrack.

This module provides the database model, connection management, and CRUD
operations for the SQLite database using SQLAlchemy ORM.
"""

from filmtrack.database.models import Base, Film
from filmtrack.database.connection import DatabaseManager, get_db_manager
from filmtrack.database.init_db import init_database, verify_schema
from filmtrack.database import crud

__all__ = [
    # Models
    'Base',
    'Film',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    # Initialization
    'init_database',
    'verify_schema',
    # CRUD module
    'crud',
]
