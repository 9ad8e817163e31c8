import pytest
from fastapi.testclient import TestClient

from catalog_api.app.core.config import settings
from catalog_api.app.main import create_app


def test_root_message(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to the Catalog API"}


def test_status(client):
    body = client.get("/api/status").json()
    assert body["name"] == "Catalog API"
    assert body["version"] == "1.0.0"
    assert body["status"] == "running"
    assert body["timestamp"]


def test_unknown_route(client):
    response = client.get("/api/unknown")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_apps_do_not_share_collections(client, database):
    client.delete("/api/games/1")
    with TestClient(create_app()) as other:
        assert other.get("/api/games/count").json() == {"total": 5}
    assert client.get("/api/games/count").json() == {"total": 4}


def test_collections_can_start_empty(monkeypatch, database):
    monkeypatch.setattr(settings, "seed_collections", False)
    with TestClient(create_app()) as client:
        assert client.get("/api/books").json() == []
        response = client.get("/api/books/first")
        assert response.status_code == 404
        assert response.json() == {"message": "No book available"}
        created = client.post("/api/books", json={"title": "A", "author": "B", "price": 1}).json()
        assert created["id"] == 1


@pytest.mark.parametrize(
    "path, payload",
    [
        ("/api/games", {"title": "Tetris", "platform": "Game Boy", "year": 1989}),
        ("/api/books", {"title": "Candide", "author": "Voltaire", "price": 5.5, "genre": "Conte"}),
        ("/api/authors", {"firstName": "Emile", "lastName": "Zola", "nationality": "Francaise"}),
        ("/api/categories", {"name": "Poesie", "description": "Vers et rimes"}),
    ],
)
def test_created_record_can_be_fetched_by_its_id(client, path, payload):
    created = client.post(path, json=payload)
    assert created.status_code == 201
    record = created.json()
    for field, value in payload.items():
        assert record[field] == value

    fetched = client.get(f"{path}/{record['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == record
