def _ids(response):
    return [a["id"] for a in response.json()]


def test_list_authors(client):
    authors = client.get("/api/authors").json()
    assert len(authors) == 6
    assert authors[0] == {
        "id": 1,
        "firstName": "Victor",
        "lastName": "Hugo",
        "nationality": "Francaise",
        "birthYear": 1802,
        "isAlive": False,
    }


def test_filter_by_name_matches_first_or_last_name(client):
    assert _ids(client.get("/api/authors", params={"name": "hugo"})) == [1]
    assert _ids(client.get("/api/authors", params={"name": "albert"})) == [2]
    assert _ids(client.get("/api/authors", params={"nationality": "britannique"})) == [3, 4, 6]


def test_sort_by_birth_year(client):
    response = client.get("/api/authors", params={"sortBy": "birthYear", "order": "desc"})
    assert _ids(response) == [3, 5, 2, 4, 6, 1]


def test_alive_and_nationalities(client):
    assert _ids(client.get("/api/authors/alive")) == [3]
    assert client.get("/api/authors/nationalities").json() == ["Francaise", "Britannique", "Americaine"]
    assert _ids(client.get("/api/authors/nationality/FRANCAISE")) == [1, 2]


def test_create_author_with_defaults(client):
    response = client.post("/api/authors", json={"firstName": "Emile", "lastName": "Zola"})
    assert response.status_code == 201
    assert response.json() == {
        "id": 7,
        "firstName": "Emile",
        "lastName": "Zola",
        "nationality": "",
        "birthYear": 0,
        "isAlive": True,
    }


def test_create_author_requires_last_name(client):
    response = client.post("/api/authors", json={"firstName": "Emile"})
    assert response.status_code == 400
    assert len(client.get("/api/authors").json()) == 6


def test_replace_and_patch_author(client):
    replaced = client.put("/api/authors/2", json={"firstName": "A.", "lastName": "Camus"}).json()
    assert replaced["birthYear"] == 0
    assert replaced["nationality"] == ""
    patched = client.patch("/api/authors/2", json={"birthYear": 1913}).json()
    assert patched["birthYear"] == 1913
    assert patched["firstName"] == "A."


def test_get_and_delete_author(client):
    assert client.get("/api/authors/5").json()["lastName"] == "Herbert"
    response = client.delete("/api/authors/5")
    assert response.status_code == 200
    assert response.json()["message"] == "Author deleted"
    missing = client.get("/api/authors/5")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Author not found"}
