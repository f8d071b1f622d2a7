"""
API tests for film record endpoints.

Uses FastAPI TestClient against the real app, with the database dependency
pointed at a fresh in-memory database per test.
"""

import pytest
from fastapi.testclient import TestClient

from filmtrack.api.dependencies import get_db
from filmtrack.api.main import app
from filmtrack.database.connection import DatabaseManager


@pytest.fixture
def db_manager():
    manager = DatabaseManager(db_path=":memory:")
    manager.create_tables()
    yield manager
    manager.close()


@pytest.fixture
def client(db_manager):
    def override_get_db():
        with db_manager.session_scope() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def create(client, **fields):
    payload = {"title": "Dune", "genre": "Sci-Fi", "year": 2021}
    payload.update(fields)
    r = client.post("/records", json=payload)
    assert r.status_code == 201
    return r.json()


class TestListAndGet:
    """Tests for GET /records and GET /records/{id}."""

    def test_list_empty(self, client):
        r = client.get("/records")
        assert r.status_code == 200
        assert r.json() == []

    def test_list_newest_first(self, client):
        first = create(client, title="Alien", genre="Horror", year=1979)
        second = create(client, title="Arrival", genre="Sci-Fi", year=2016)

        r = client.get("/records")
        assert r.status_code == 200
        assert [f["id"] for f in r.json()] == [second["id"], first["id"]]

    def test_get_film(self, client):
        film = create(client)

        r = client.get(f"/records/{film['id']}")
        assert r.status_code == 200
        assert r.json() == film

    def test_get_film_not_found(self, client):
        """GET /records/{id} returns 404 with a message for unknown ids."""
        r = client.get("/records/not-an-id")
        assert r.status_code == 404
        assert "not found" in r.json()["message"].lower()


class TestCreate:
    """Tests for POST /records."""

    def test_create_film(self, client):
        """POST /records returns 201 with the stored record."""
        r = client.post("/records", json={"title": "Dune", "genre": "Sci-Fi", "year": 2021})
        assert r.status_code == 201
        data = r.json()
        assert data["id"]
        assert data["title"] == "Dune"
        assert data["genre"] == "Sci-Fi"
        assert data["year"] == 2021
        assert data["watched"] is False
        assert data["watchlist"] is False
        assert "createdAt" in data

    def test_create_film_with_flags(self, client):
        data = create(client, watched=True, watchlist=True)
        assert data["watched"] is True
        assert data["watchlist"] is True

    @pytest.mark.parametrize("missing", ["title", "genre", "year"])
    def test_create_missing_field(self, client, missing):
        """POST /records without a required field returns 400."""
        payload = {"title": "Dune", "genre": "Sci-Fi", "year": 2021}
        del payload[missing]

        r = client.post("/records", json=payload)
        assert r.status_code == 400
        assert r.json()["message"] == "Title, genre and year are required"
        assert client.get("/records").json() == []

    def test_create_empty_title(self, client):
        r = client.post("/records", json={"title": "", "genre": "Sci-Fi", "year": 2021})
        assert r.status_code == 400

    def test_create_malformed_year(self, client):
        """Type errors are reported as 400 with the error shape."""
        r = client.post("/records", json={"title": "Dune", "genre": "Sci-Fi", "year": "soon"})
        assert r.status_code == 400
        body = r.json()
        assert body["message"] == "Invalid request body"
        assert "year" in body["error"]


class TestUpdate:
    """Tests for PUT /records/{id}."""

    def test_partial_update(self, client):
        """PUT with one field returns the merged record."""
        film = create(client)

        r = client.put(f"/records/{film['id']}", json={"watched": True})
        assert r.status_code == 200
        data = r.json()
        assert data["watched"] is True
        assert data["title"] == "Dune"
        assert data["genre"] == "Sci-Fi"
        assert data["year"] == 2021
        assert data["watchlist"] is False
        assert data["createdAt"] == film["createdAt"]

    def test_full_update_ignores_read_only_fields(self, client):
        """A full record (as the client sends it) is accepted; id is not changed."""
        film = create(client)
        payload = dict(film, id="something-else", title="Dune: Part One", watchlist=True)

        r = client.put(f"/records/{film['id']}", json=payload)
        assert r.status_code == 200
        data = r.json()
        assert data["id"] == film["id"]
        assert data["title"] == "Dune: Part One"
        assert data["watchlist"] is True

    def test_update_not_found(self, client):
        r = client.put("/records/missing", json={"watched": True})
        assert r.status_code == 404
        assert "message" in r.json()

    def test_update_empty_title(self, client):
        film = create(client)

        r = client.put(f"/records/{film['id']}", json={"title": ""})
        assert r.status_code == 400
        assert client.get(f"/records/{film['id']}").json()["title"] == "Dune"

    def test_update_null_flag(self, client):
        film = create(client)

        r = client.put(f"/records/{film['id']}", json={"watched": None})
        assert r.status_code == 400


class TestDelete:
    """Tests for DELETE /records/{id}."""

    def test_delete_film(self, client):
        film = create(client)

        r = client.delete(f"/records/{film['id']}")
        assert r.status_code == 200
        data = r.json()
        assert data["message"] == "Film deleted"
        assert data["deletedRecord"]["id"] == film["id"]
        assert data["deletedRecord"]["title"] == "Dune"
        assert client.get("/records").json() == []

    def test_delete_twice(self, client):
        film = create(client)
        client.delete(f"/records/{film['id']}")

        r = client.delete(f"/records/{film['id']}")
        assert r.status_code == 404


class TestFailures:
    """Store failures and system endpoints."""

    def test_store_failure_returns_500(self, client, db_manager):
        db_manager.drop_tables()

        r = client.get("/records")
        assert r.status_code == 500
        body = r.json()
        assert body["message"] == "Storage error"
        assert body["error"]

    def test_health(self, client):
        create(client)

        r = client.get("/health")
        assert r.status_code == 200
        assert r.json() == {"status": "healthy", "database": "connected", "films": 1}

    def test_health_unhealthy(self, client, db_manager):
        db_manager.drop_tables()

        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "unhealthy"

    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["health"] == "/health"


class TestStartup:
    """Application lifespan."""

    def test_startup_configures_logging_and_database(self, monkeypatch, db_manager):
        import filmtrack.api.main as main

        calls = []
        monkeypatch.setattr(main, "setup_logging", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setattr(main, "get_db_manager", lambda db_path: db_manager)
        monkeypatch.setenv("LOG_LEVEL", "debug")

        with TestClient(app) as started:
            assert started.get("/").status_code == 200

        assert calls == [{"log_file": "api.log", "level": "DEBUG"}]


class TestConfig:
    """Environment-driven configuration."""

    def test_default_database_path_is_relative(self, monkeypatch):
        from filmtrack.api.config import get_database_path

        monkeypatch.delenv("DATABASE_URL", raising=False)
        assert get_database_path() == "data/filmtrack.db"

    def test_database_url_env(self, monkeypatch):
        from filmtrack.api.config import get_database_path

        monkeypatch.setenv("DATABASE_URL", "sqlite:///tmp/films.db")
        assert get_database_path() == "tmp/films.db"
