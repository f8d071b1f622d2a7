"""
Tests for DatabaseManager connection pooling and session isolation.
"""

import pytest
from sqlalchemy.pool import StaticPool

from filmtrack.database import crud
from filmtrack.database.connection import DatabaseManager
from filmtrack.database.models import Film


@pytest.fixture
def file_manager(tmp_path):
    manager = DatabaseManager(db_path=str(tmp_path / "films.db"))
    manager.create_tables()
    yield manager
    manager.close()


class TestPooling:
    """Pool selection per database kind."""

    def test_memory_database_shares_one_connection(self):
        manager = DatabaseManager(db_path=":memory:")
        try:
            assert isinstance(manager.engine.pool, StaticPool)
        finally:
            manager.close()

    def test_file_database_uses_separate_connections(self, file_manager):
        assert not isinstance(file_manager.engine.pool, StaticPool)


class TestSessionIsolation:
    """Concurrent sessions on a file database do not interfere."""

    def test_uncommitted_row_is_invisible_and_survives_other_session(self, file_manager):
        writer = file_manager.SessionLocal()
        try:
            writer.add(Film(title='Dune', genre='Sci-Fi', year=2021, seq=1))
            writer.flush()

            reader = file_manager.SessionLocal()
            try:
                assert crud.count_films(reader) == 0
            finally:
                reader.close()

            writer.commit()
        finally:
            writer.close()

        with file_manager.session_scope() as session:
            assert crud.count_films(session) == 1
            assert crud.list_films(session)[0].title == 'Dune'
