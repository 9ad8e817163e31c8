def test_list_and_filter_categories(client):
    categories = client.get("/api/categories").json()
    assert [c["name"] for c in categories] == ["Roman", "Fantasy", "Science-Fiction", "Aventure"]
    assert categories[1]["bookCount"] == 2
    filtered = client.get("/api/categories", params={"name": "fan"}).json()
    assert [c["id"] for c in filtered] == [2]


def test_paginate_categories(client):
    body = client.get("/api/categories", params={"page": 2, "limit": 3}).json()
    assert [c["id"] for c in body["data"]] == [4]
    assert body["pagination"]["totalPages"] == 2


def test_create_category(client):
    response = client.post("/api/categories", json={"name": "Poesie"})
    assert response.status_code == 201
    assert response.json() == {"id": 5, "name": "Poesie", "description": "", "bookCount": 0}


def test_create_category_requires_name(client):
    assert client.post("/api/categories", json={"description": "nameless"}).status_code == 400


def test_replace_patch_delete_category(client):
    replaced = client.put("/api/categories/1", json={"name": "Romans"}).json()
    assert replaced == {"id": 1, "name": "Romans", "description": "", "bookCount": 0}

    patched = client.patch("/api/categories/1", json={"bookCount": 4}).json()
    assert patched["name"] == "Romans"
    assert patched["bookCount"] == 4

    deleted = client.delete("/api/categories/1")
    assert deleted.status_code == 200
    assert deleted.json()["message"] == "Category deleted"
    assert client.get("/api/categories/1").status_code == 404


def test_unknown_category(client):
    response = client.get("/api/categories/42")
    assert response.status_code == 404
    assert response.json() == {"message": "Category not found"}
