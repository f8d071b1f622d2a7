"""
FastAPI dependency injection for database sessions.
"""

from typing import Generator
from sqlalchemy.orm import Session

from filmtrack.database.connection import get_db_manager
from filmtrack.api.config import get_database_path


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    db_manager = get_db_manager(db_path=get_database_path())
    with db_manager.session_scope() as session:
        yield session
