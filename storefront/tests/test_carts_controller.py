from __future__ import annotations

from flask.testing import FlaskClient


def test_list_carts(client: FlaskClient) -> None:
    body = client.get("/carts").get_json()

    assert [c["id"] for c in body] == list(range(1, 11))
    assert body[0]["userId"] == "user-001"
    assert body[0]["date"].startswith("2025-05-27T12:00:00")
    assert body[0]["products"] == [
        {"productId": 1, "quantity": 1},
        {"productId": 3, "quantity": 1},
    ]


def test_list_carts_sort_and_limit(client: FlaskClient) -> None:
    body = client.get("/carts?sort=desc&limit=2").get_json()

    assert [c["id"] for c in body] == [10, 9]


def test_list_carts_in_date_range(client: FlaskClient) -> None:
    response = client.get(
        "/carts?startdate=2025-05-27T12:00:00Z&enddate=2025-05-30T12:00:00Z"
    )

    assert [c["id"] for c in response.get_json()] == [1, 2, 4]


def test_date_range_with_one_bound(client: FlaskClient) -> None:
    response = client.get("/carts?startdate=2025-05-31T12:00:00Z&sort=desc")

    assert [c["id"] for c in response.get_json()] == [10, 6]


def test_blank_dates_mean_no_filter(client: FlaskClient) -> None:
    response = client.get("/carts?startdate=&enddate=")

    assert len(response.get_json()) == 10


def test_malformed_date_returns_422(client: FlaskClient) -> None:
    response = client.get("/carts?startdate=yesterday")

    assert response.status_code == 422


def test_carts_for_user_ordered_by_date(client: FlaskClient) -> None:
    body = client.get("/carts/user/user-002").get_json()

    assert [c["id"] for c in body] == [8, 3, 4]


def test_carts_for_unknown_user(client: FlaskClient) -> None:
    assert client.get("/carts/user/nobody").get_json() == []


def test_get_missing_cart_returns_404(client: FlaskClient) -> None:
    response = client.get("/carts/42")

    assert response.status_code == 404
    assert response.get_json()["context"] == {"resource": "cart", "id": 42}


def test_create_cart(client: FlaskClient) -> None:
    response = client.post(
        "/carts",
        json={
            "userId": "user-003",
            "date": "2025-06-01T08:00:00Z",
            "products": [{"productId": 4, "quantity": 2}],
        },
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["id"] == 11
    assert body["products"] == [{"productId": 4, "quantity": 2}]
    assert [c["id"] for c in client.get("/carts/user/user-003").get_json()][-1] == 11


def test_create_cart_requires_user(client: FlaskClient) -> None:
    response = client.post("/carts", json={"products": []})

    assert response.status_code == 422
    assert "userId" in response.get_json()["context"]["fields"]


def test_replace_cart(client: FlaskClient) -> None:
    response = client.put(
        "/carts/1",
        json={"userId": "user-002", "date": "2025-06-01T00:00:00Z", "products": []},
    )

    assert response.status_code == 200
    body = client.get("/carts/1").get_json()
    assert body["userId"] == "user-002"
    assert body["products"] == []


def test_update_missing_cart_returns_404(client: FlaskClient) -> None:
    response = client.patch("/carts/99", json={"userId": "user-001"})

    assert response.status_code == 404


def test_delete_cart(client: FlaskClient) -> None:
    response = client.delete("/carts/10")

    assert response.status_code == 200
    assert response.get_json()["id"] == 10
    assert client.delete("/carts/10").status_code == 404
    assert [c["id"] for c in client.get("/carts/user/user-001").get_json()] == [7, 1, 2]
