from __future__ import annotations

from flask.testing import FlaskClient

NEW_PRODUCT = {
    "title": "Desk Lamp",
    "price": 39.5,
    "description": "LED desk lamp",
    "image": "https://example.com/lamp.jpg",
    "category": "home",
}


def test_list_products_ascending_by_default(client: FlaskClient) -> None:
    response = client.get("/products")

    assert response.status_code == 200
    body = response.get_json()
    assert [p["id"] for p in body] == list(range(1, 21))
    assert body[0] == {
        "id": 1,
        "title": "Laptop",
        "price": 799.99,
        "description": "High-performance laptop with 16GB RAM",
        "image": "https://example.com/laptop.jpg",
        "category": "electronics",
    }


def test_list_products_sort_and_limit(client: FlaskClient) -> None:
    response = client.get("/products?sort=DESC&limit=3")

    assert [p["id"] for p in response.get_json()] == [20, 19, 18]


def test_non_positive_limit_is_ignored(client: FlaskClient) -> None:
    response = client.get("/products?limit=0")

    assert len(response.get_json()) == 20


def test_unrecognised_sort_lists_ascending(client: FlaskClient) -> None:
    response = client.get("/products?sort=descending")

    assert response.status_code == 200
    assert [p["id"] for p in response.get_json()] == list(range(1, 21))


def test_unparseable_limit_lists_everything(client: FlaskClient) -> None:
    response = client.get("/products?limit=abc&sort=desc")

    assert response.status_code == 200
    assert [p["id"] for p in response.get_json()] == list(range(20, 0, -1))


def test_list_categories(client: FlaskClient) -> None:
    response = client.get("/products/categories")

    assert response.get_json() == ["clothing", "electronics", "home", "sports"]


def test_products_by_category_is_case_insensitive(client: FlaskClient) -> None:
    response = client.get("/products/category/Sports?sort=desc&limit=2")

    assert [p["id"] for p in response.get_json()] == [20, 19]


def test_unknown_category_is_empty(client: FlaskClient) -> None:
    assert client.get("/products/category/toys").get_json() == []


def test_get_product(client: FlaskClient) -> None:
    response = client.get("/products/11")

    assert response.status_code == 200
    assert response.get_json()["title"] == "Coffee Maker"


def test_get_missing_product_returns_404(client: FlaskClient) -> None:
    response = client.get("/products/999")

    assert response.status_code == 404
    assert response.get_json() == {
        "error": "not_found",
        "context": {"resource": "product", "id": 999},
    }


def test_create_product_assigns_next_id(client: FlaskClient) -> None:
    response = client.post("/products", json={**NEW_PRODUCT, "id": 5})

    assert response.status_code == 200
    created = response.get_json()
    assert created["id"] == 21
    assert created["price"] == 39.5
    assert client.get("/products/21").get_json()["title"] == "Desk Lamp"
    assert client.get("/products/5").get_json()["title"] == "Smart Watch"


def test_create_product_without_body_returns_400(client: FlaskClient) -> None:
    response = client.post("/products", data="not json", content_type="text/plain")

    assert response.status_code == 400
    assert response.get_json()["message"] == "Product data is required"


def test_create_product_missing_fields_returns_422(client: FlaskClient) -> None:
    response = client.post("/products", json={"title": "No price"})

    assert response.status_code == 422
    assert set(response.get_json()["context"]["fields"]) == {"price", "category"}


def test_replace_product_keeps_path_id(client: FlaskClient) -> None:
    response = client.put("/products/3", json={**NEW_PRODUCT, "id": 77})

    assert response.status_code == 200
    assert response.get_json()["id"] == 3
    assert client.get("/products/3").get_json()["title"] == "Desk Lamp"
    assert client.get("/products/77").status_code == 404


def test_patch_replaces_whole_product(client: FlaskClient) -> None:
    response = client.patch("/products/4", json={"title": "Slate", "price": 1, "category": "misc"})

    assert response.status_code == 200
    body = client.get("/products/4").get_json()
    assert body["description"] == ""
    assert body["category"] == "misc"


def test_update_missing_product_returns_404(client: FlaskClient) -> None:
    response = client.put("/products/404", json=NEW_PRODUCT)

    assert response.status_code == 404
    assert len(client.get("/products").get_json()) == 20


def test_delete_product(client: FlaskClient) -> None:
    response = client.delete("/products/2")

    assert response.status_code == 200
    assert response.get_json()["title"] == "Smartphone"
    assert client.get("/products/2").status_code == 404
    assert client.delete("/products/2").status_code == 404


def test_deleted_id_is_not_reused(client: FlaskClient) -> None:
    client.delete("/products/20")

    created = client.post("/products", json=NEW_PRODUCT).get_json()

    assert created["id"] == 21


def test_create_with_token_still_succeeds(client: FlaskClient, login) -> None:
    response = client.post("/products", json=NEW_PRODUCT, headers=login("test"))

    assert response.status_code == 200
