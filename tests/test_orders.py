# tests/test_orders.py

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from ecomm_service.models import Order, OrderDetail


def test_create_order_success(client: TestClient, product_factory):
    desk = product_factory()
    chair = product_factory(name="Chair", price=45.0)

    response = client.post(
        "/orders",
        json={
            "ship_addr": "1 Main St",
            "details": [
                {"product_id": desk["id"], "quantity": 1, "discount": 0.0},
                {"product_id": chair["id"], "quantity": 4, "discount": 0.25},
            ],
        },
    )

    assert response.status_code == 201
    order = response.json()
    assert isinstance(order["order_id"], int)
    assert order["ship_addr"] == "1 Main St"
    assert order["order_date"]
    lines = order["order_details"]
    assert [(line["product_id"], line["quantity"], line["discount"]) for line in lines] == [
        (desk["id"], 1, 0.0),
        (chair["id"], 4, 0.25),
    ]
    assert all(line["order_id"] == order["order_id"] for line in lines)
    assert all(isinstance(line["order_details_id"], int) for line in lines)


def test_create_order_stamps_server_time(client: TestClient, product_factory):
    """A client-supplied order_date is ignored in favour of the server clock."""
    product = product_factory()
    fixed_now = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)

    with patch(
        "ecomm_service.services.order_service.utcnow", return_value=fixed_now
    ):
        response = client.post(
            "/orders",
            json={
                "ship_addr": "1 Main St",
                "order_date": "1999-01-01T00:00:00",
                "details": [{"product_id": product["id"], "quantity": 1}],
            },
        )

    assert response.status_code == 201
    order_date = datetime.fromisoformat(
        response.json()["order_date"].replace("Z", "+00:00")
    )
    assert order_date.tzinfo is not None
    assert order_date == fixed_now


def test_listed_order_date_is_utc(client: TestClient):
    # SQLite drops the offset on storage; the response restores UTC
    client.post("/orders", json={"ship_addr": "1 Main St"})
    raw = client.get("/orders").json()[0]["order_date"]
    order_date = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    assert order_date.utcoffset() == timedelta(0)


def test_create_order_without_lines(client: TestClient):
    response = client.post("/orders", json={"ship_addr": "Nowhere"})
    assert response.status_code == 201
    assert response.json()["order_details"] == []


def test_create_order_accepts_unvalidated_lines(client: TestClient, product_factory):
    product = product_factory()
    response = client.post(
        "/orders",
        json={
            "ship_addr": "1 Main St",
            "details": [{"product_id": product["id"], "quantity": 0, "discount": 5.0}],
        },
    )
    assert response.status_code == 201
    line = response.json()["order_details"][0]
    assert line["quantity"] == 0
    assert line["discount"] == 5.0


def test_create_order_unknown_product_rolls_back(
    client: TestClient, db_session_for_test: Session, product_factory
):
    product = product_factory()
    response = client.post(
        "/orders",
        json={
            "ship_addr": "1 Main St",
            "details": [
                {"product_id": product["id"], "quantity": 1},
                {"product_id": 9999, "quantity": 1},
            ],
        },
    )

    assert response.status_code == 400
    assert db_session_for_test.query(Order).count() == 0
    assert db_session_for_test.query(OrderDetail).count() == 0


def test_create_order_malformed_line(client: TestClient):
    response = client.post(
        "/orders",
        json={"ship_addr": "1 Main St", "details": [{"quantity": 1}]},
    )
    assert response.status_code == 422


def test_list_orders_empty(client: TestClient):
    response = client.get("/orders")
    assert response.status_code == 200
    assert response.json() == []


def test_list_orders_expands_lines(client: TestClient, product_factory):
    product = product_factory()
    first = client.post(
        "/orders",
        json={"ship_addr": "A", "details": [{"product_id": product["id"], "quantity": 1}]},
    ).json()
    second = client.post(
        "/orders",
        json={"ship_addr": "B", "details": [{"product_id": product["id"], "quantity": 2}]},
    ).json()

    response = client.get("/orders")
    assert response.status_code == 200
    orders = response.json()
    assert [o["order_id"] for o in orders] == [first["order_id"], second["order_id"]]
    assert [o["order_details"][0]["quantity"] for o in orders] == [1, 2]


def test_orders_have_no_single_item_or_delete_routes(client: TestClient):
    assert client.get("/orders/1").status_code == 404
    assert client.delete("/orders").status_code == 405
    assert client.put("/orders").status_code == 405
