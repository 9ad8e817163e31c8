def test_list_games_returns_seed_collection(client):
    response = client.get("/api/games")
    assert response.status_code == 200
    games = response.json()
    assert [g["id"] for g in games] == [1, 2, 3, 4, 5]
    assert games[0] == {"id": 1, "title": "valorant", "platform": "PC", "year": 2020, "isFavorite": True}


def test_list_games_filters_by_title_and_platform(client):
    assert [g["id"] for g in client.get("/api/games", params={"title": "ZEL"}).json()] == [5]
    assert [g["id"] for g in client.get("/api/games", params={"platform": "pc"}).json()] == [1, 2]


def test_list_games_sorted_and_paginated(client):
    ascending = client.get("/api/games", params={"sortBy": "year", "order": "asc"}).json()
    assert [g["id"] for g in ascending] == [4, 5, 3, 1, 2]

    body = client.get("/api/games", params={"page": 2, "limit": 2}).json()
    assert [g["id"] for g in body["data"]] == [3, 4]
    assert body["pagination"] == {"currentPage": 2, "totalPages": 3, "totalItems": 5, "itemsPerPage": 2}


def test_first_and_count(client):
    assert client.get("/api/games/first").json()["id"] == 1
    assert client.get("/api/games/count").json() == {"total": 5}


def test_retro_games(client):
    response = client.get("/api/games/retro")
    assert [g["id"] for g in response.json()] == [4, 5]


def test_platforms_in_first_appearance_order(client):
    assert client.get("/api/games/platforms").json() == ["PC", "Multi-platform", "Arcade", "Nintendo 64"]


def test_search_platform_and_year(client):
    assert [g["id"] for g in client.get("/api/games/search", params={"title": "craft"}).json()] == [3]
    assert [g["id"] for g in client.get("/api/games/platform/arcade").json()] == [4]
    assert [g["id"] for g in client.get("/api/games/year/2020").json()] == [1, 2]


def test_stats(client):
    assert client.get("/api/games/stats").json() == {"total": 5, "favorites": 4, "oldestGame": "pacman"}


def test_check_title(client):
    found = client.get("/api/games/check/MINECRAFT")
    assert found.status_code == 200
    assert found.json() == {"check": True}
    missing = client.get("/api/games/check/zork")
    assert missing.status_code == 404
    assert missing.json() == {"check": False}


def test_get_game_and_title(client):
    assert client.get("/api/games/4").json()["title"] == "pacman"
    assert client.get("/api/games/1/title").json() == "valorant"


def test_get_game_errors(client):
    missing = client.get("/api/games/99")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Game not found"}
    invalid = client.get("/api/games/abc")
    assert invalid.status_code == 400
    assert "error" in invalid.json()


def test_create_game_applies_defaults(client):
    response = client.post("/api/games", json={"title": "Tetris", "platform": "Game Boy"})
    assert response.status_code == 201
    assert response.json() == {"id": 6, "title": "Tetris", "platform": "Game Boy", "year": None, "isFavorite": False}
    assert client.get("/api/games/count").json() == {"total": 6}


def test_create_game_requires_platform(client):
    response = client.post("/api/games", json={"title": "X"})
    assert response.status_code == 400
    assert "error" in response.json()
    assert client.get("/api/games/count").json() == {"total": 5}


def test_ids_are_not_reused_after_delete(client):
    client.delete("/api/games/5")
    created = client.post("/api/games", json={"title": "Doom", "platform": "PC"}).json()
    assert created["id"] == 6


def test_batch_create_skips_invalid_entries(client):
    response = client.post(
        "/api/games/batch",
        json=[{"title": "Tetris", "platform": "Game Boy"}, {"title": ""}, "junk"],
    )
    assert response.status_code == 201
    assert response.json()["addedCount"] == 1
    assert client.get("/api/games/count").json() == {"total": 6}


def test_batch_create_requires_a_list(client):
    response = client.post("/api/games/batch", json={"title": "Tetris"})
    assert response.status_code == 400


def test_duplicate_game(client):
    response = client.post("/api/games/4/duplicate")
    assert response.status_code == 201
    assert response.json() == {"id": 6, "title": "Copy of pacman", "platform": "Arcade", "year": 1980, "isFavorite": True}
    assert client.post("/api/games/42/duplicate").status_code == 404


def test_replace_game(client):
    response = client.put("/api/games/1", json={"title": "Valorant", "platform": "PC", "year": 2021})
    assert response.status_code == 200
    assert response.json() == {"id": 1, "title": "Valorant", "platform": "PC", "year": 2021, "isFavorite": False}


def test_replace_game_requires_year(client):
    response = client.put("/api/games/1", json={"title": "Valorant", "platform": "PC"})
    assert response.status_code == 400
    assert client.get("/api/games/1").json()["title"] == "valorant"


def test_replace_missing_game(client):
    response = client.put("/api/games/99", json={"title": "A", "platform": "PC", "year": 2000})
    assert response.status_code == 404


def test_patch_game_keeps_other_fields(client):
    response = client.patch("/api/games/3", json={"year": 2012})
    assert response.status_code == 200
    assert response.json() == {"id": 3, "title": "minecraft", "platform": "Multi-platform", "year": 2012, "isFavorite": True}


def test_toggle_favorite_twice_restores_value(client):
    first = client.patch("/api/games/2/favorite").json()
    assert first["isFavorite"] is True
    second = client.patch("/api/games/2/favorite").json()
    assert second["isFavorite"] is False


def test_clear_favorites(client):
    response = client.patch("/api/games/favorite/clear")
    assert response.status_code == 200
    assert response.json() == {"message": "All games removed from favorites"}
    assert all(not g["isFavorite"] for g in client.get("/api/games").json())
    assert client.get("/api/games/stats").json()["favorites"] == 0


def test_delete_game(client):
    response = client.delete("/api/games/2")
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Game deleted"
    assert body["deleted"]["id"] == 2
    assert client.get("/api/games/2").status_code == 404
    assert [g["id"] for g in client.get("/api/games").json()] == [1, 3, 4, 5]


def test_delete_missing_game(client):
    response = client.delete("/api/games/99")
    assert response.status_code == 404
    assert response.json() == {"message": "Game not found"}
