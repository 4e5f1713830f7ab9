from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from moovies.config import settings


def _storage_down():
    return OperationalError("SELECT 1", {}, Exception("connection refused"))


@patch("moovies.api.v1.categories.category_store")
def test_storage_error_on_list_becomes_500(mock_store, client):
    mock_store.find_all.side_effect = _storage_down()

    resp = client.get("/api/v1/categories")
    assert resp.status_code == 500
    assert "connection refused" in resp.json()["error"]


@patch("moovies.api.v1.movies.movie_store")
def test_storage_error_on_create_becomes_500(mock_store, client):
    mock_store.create.side_effect = _storage_down()

    resp = client.post("/api/v1/movies", json={"title": "Heat", "category_id": 1})
    assert resp.status_code == 500
    assert "connection refused" in resp.json()["error"]


@patch("moovies.api.v1.movies.movie_store")
def test_storage_error_on_delete_becomes_500(mock_store, client):
    mock_store.remove.side_effect = _storage_down()

    resp = client.delete("/api/v1/movies/1")
    assert resp.status_code == 500


def test_unknown_route_uses_error_body(client):
    resp = client.get("/api/v1/directors")
    assert resp.status_code == 404
    assert "error" in resp.json()


@pytest.fixture
def strict(monkeypatch):
    monkeypatch.setattr(settings, "STRICT_MISSING_IDS", True)


def test_strict_mode_update_missing_category(client, strict):
    resp = client.put("/api/v1/categories", json={"id": 3, "name": "Ghost"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Categoria não encontrada"}


def test_strict_mode_delete_missing_movie(client, strict):
    resp = client.delete("/api/v1/movies/3")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Filme não encontrado"}


def test_strict_mode_update_missing_movie(client, strict, action):
    resp = client.put(
        "/api/v1/movies",
        json={"id": 8, "title": "Heat", "category_id": action["id"]},
    )
    assert resp.status_code == 404
    assert resp.json() == {"error": "Filme não encontrado"}
