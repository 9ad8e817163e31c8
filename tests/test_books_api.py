import pytest


def _ids(response):
    return [b["id"] for b in response.json()]


def test_list_books(client):
    response = client.get("/api/books")
    assert response.status_code == 200
    assert _ids(response) == [1, 2, 3, 4, 5, 6, 7, 8]
    assert response.json()[1]["inStock"] is True


def test_in_stock_filter_compares_with_true(client):
    assert _ids(client.get("/api/books", params={"inStock": "true"})) == [1, 2, 4, 5, 7, 8]
    assert _ids(client.get("/api/books", params={"inStock": "false"})) == [3, 6]
    assert _ids(client.get("/api/books", params={"inStock": "yes"})) == [3, 6]


def test_list_books_text_filters(client):
    assert _ids(client.get("/api/books", params={"author": "hugo"})) == [1, 7]
    assert _ids(client.get("/api/books", params={"title": "harry", "genre": "fantasy"})) == [3, 8]


def test_sort_descending_is_reverse_of_ascending(client):
    ascending = _ids(client.get("/api/books", params={"sortBy": "price", "order": "asc"}))
    descending = _ids(client.get("/api/books", params={"sortBy": "price", "order": "desc"}))
    assert ascending == [2, 4, 3, 7, 5, 1, 8, 6]
    assert descending == list(reversed(ascending))


def test_unknown_sort_field_keeps_collection_order(client):
    assert _ids(client.get("/api/books", params={"sortBy": "colour"})) == [1, 2, 3, 4, 5, 6, 7, 8]


def test_pages_cover_the_whole_collection(client):
    first = client.get("/api/books", params={"page": 1, "limit": 3}).json()
    assert first["pagination"] == {"currentPage": 1, "totalPages": 3, "totalItems": 8, "itemsPerPage": 3}
    collected = []
    for page in range(1, 4):
        collected.extend(b["id"] for b in client.get("/api/books", params={"page": page, "limit": 3}).json()["data"])
    assert collected == [1, 2, 3, 4, 5, 6, 7, 8]


def test_limit_alone_defaults_to_first_page(client):
    body = client.get("/api/books", params={"limit": 5}).json()
    assert [b["id"] for b in body["data"]] == [1, 2, 3, 4, 5]
    assert body["pagination"]["currentPage"] == 1


def test_count_first_last(client):
    assert client.get("/api/books/count").json() == {"total": 8}
    assert client.get("/api/books/first").json()["id"] == 1
    assert client.get("/api/books/last").json()["id"] == 8


def test_views(client):
    assert _ids(client.get("/api/books/available")) == [1, 2, 4, 5, 7, 8]
    assert _ids(client.get("/api/books/classics")) == [1, 2, 3, 4, 5, 6, 7]
    assert _ids(client.get("/api/books/top-rated")) == [1, 2, 3, 4, 5, 6]
    assert client.get("/api/books/genres").json() == ["Roman", "Fantasy", "Science-Fiction", "Aventure"]


def test_stats(client):
    stats = client.get("/api/books/stats").json()
    assert stats["total"] == 8
    assert stats["available"] == 6
    assert stats["unavailable"] == 2
    assert stats["averageRating"] == pytest.approx(4.36, abs=0.01)
    assert stats["averagePrice"] == pytest.approx(12.88, abs=0.01)
    assert stats["oldestBook"] == "Notre-Dame de Paris"
    assert stats["newestBook"] == "Harry Potter et l'Enfant maudit"


def test_lookups(client):
    assert _ids(client.get("/api/books/search", params={"author": "rowling"})) == [3, 8]
    assert _ids(client.get("/api/books/genre/FANTASY")) == [3, 6, 8]
    assert _ids(client.get("/api/books/year/1965")) == [5]
    assert _ids(client.get("/api/books/price/8/12")) == [3, 4, 7]
    assert client.get("/api/books/check/dune").json() == {"exists": True}
    assert client.get("/api/books/check/ulysses").json() == {"exists": False}


def test_field_views(client):
    assert client.get("/api/books/2/title").json() == {"title": "L'Etranger"}
    assert client.get("/api/books/2/price").json() == {"price": 7.9}
    assert client.get("/api/books/5").json()["title"] == "Dune"


def test_non_numeric_id_is_not_found(client):
    response = client.get("/api/books/abc")
    assert response.status_code == 404
    assert response.json() == {"message": "Book not found"}


def test_create_book_requires_author_and_price(client):
    response = client.post("/api/books", json={"title": "X"})
    assert response.status_code == 400
    assert "error" in response.json()
    assert client.get("/api/books/count").json() == {"total": 8}


def test_create_book_applies_defaults(client):
    response = client.post("/api/books", json={"title": "Candide", "author": "Voltaire", "price": 5})
    assert response.status_code == 201
    assert response.json() == {
        "id": 9,
        "title": "Candide",
        "author": "Voltaire",
        "year": 0,
        "genre": "",
        "price": 5.0,
        "inStock": True,
        "rating": 0.0,
    }


def test_create_book_rejects_out_of_range_rating(client):
    response = client.post("/api/books", json={"title": "A", "author": "B", "price": 1, "rating": 6})
    assert response.status_code == 400


def test_batch_create(client):
    response = client.post(
        "/api/books/batch",
        json=[
            {"title": "Candide", "author": "Voltaire", "price": 5},
            {"title": "Zadig", "author": "Voltaire", "price": 4.5},
            {"title": "No price", "author": "Nobody"},
        ],
    )
    assert response.status_code == 201
    assert response.json()["addedCount"] == 2
    assert client.get("/api/books/count").json() == {"total": 10}


def test_duplicate_book(client):
    response = client.post("/api/books/5/duplicate")
    assert response.status_code == 201
    assert response.json()["id"] == 9
    assert response.json()["title"] == "Copy of Dune"


def test_replace_book_resets_omitted_fields(client):
    response = client.put("/api/books/1", json={"title": "Hernani", "author": "Victor Hugo", "price": 6})
    assert response.status_code == 200
    body = response.json()
    assert body["year"] == 0
    assert body["genre"] == ""
    assert body["rating"] == 0
    assert body["inStock"] is True


def test_replace_book_errors(client):
    assert client.put("/api/books/1", json={"title": "Hernani", "price": 6}).status_code == 400
    assert client.put("/api/books/99", json={"title": "A", "author": "B", "price": 1}).status_code == 404


def test_patch_book(client):
    response = client.patch("/api/books/1", json={"rating": 2})
    assert response.status_code == 200
    body = response.json()
    assert body["rating"] == 2
    assert body["title"] == "Les Miserables"
    assert body["price"] == 14.5
    assert client.patch("/api/books/1", json={"rating": 9}).status_code == 400


def test_toggle_stock(client):
    response = client.patch("/api/books/3/toggle-stock")
    assert response.status_code == 200
    assert response.json()["inStock"] is True
    assert client.get("/api/books/3").json()["inStock"] is True


def test_discount(client):
    response = client.patch("/api/books/5/discount", json={"percentage": 10})
    assert response.status_code == 200
    assert response.json()["newPrice"] == pytest.approx(11.61)
    assert client.patch("/api/books/5/discount", json={"percentage": 150}).status_code == 400
    assert client.patch("/api/books/5/discount", json={}).status_code == 400


def test_rating(client):
    response = client.patch("/api/books/8/rating", json={"rating": 3.5})
    assert response.status_code == 200
    assert response.json()["rating"] == 3.5
    assert client.patch("/api/books/8/rating", json={"rating": 7}).status_code == 400
    assert client.patch("/api/books/99/rating", json={"rating": 3}).status_code == 404


def test_clear_stock(client):
    response = client.patch("/api/books/clear-stock")
    assert response.status_code == 200
    assert response.json()["count"] == 8
    assert client.get("/api/books/available").json() == []


def test_increase_prices(client):
    response = client.patch("/api/books/increase-prices", json={"percentage": 10})
    assert response.status_code == 200
    assert response.json()["count"] == 8
    assert client.get("/api/books/4/price").json()["price"] == pytest.approx(9.02)
    assert client.patch("/api/books/increase-prices", json={}).status_code == 400


def test_delete_out_of_stock(client):
    response = client.delete("/api/books/out-of-stock")
    assert response.status_code == 200
    body = response.json()
    assert body["deletedCount"] == 2
    assert body["remaining"] == 6
    assert _ids(client.get("/api/books")) == [1, 2, 4, 5, 7, 8]


def test_delete_before_year(client):
    body = client.delete("/api/books/before/1950").json()
    assert body["deletedCount"] == 4
    assert body["remaining"] == 4
    assert _ids(client.get("/api/books")) == [3, 5, 6, 8]


def test_delete_by_ids_reports_missing(client):
    response = client.request("DELETE", "/api/books/batch", json={"ids": [1, 2, 99]})
    assert response.status_code == 200
    body = response.json()
    assert body["deletedCount"] == 2
    assert body["deletedIds"] == [1, 2]
    assert body["notFoundIds"] == [99]
    assert client.get("/api/books/count").json() == {"total": 6}


def test_delete_by_ids_requires_a_list(client):
    response = client.request("DELETE", "/api/books/batch", json={"ids": "all"})
    assert response.status_code == 400


def test_delete_book(client):
    response = client.delete("/api/books/7")
    assert response.status_code == 200
    assert response.json()["message"] == "Book deleted"
    assert response.json()["deleted"]["title"] == "Notre-Dame de Paris"
    assert client.delete("/api/books/7").status_code == 404
