"""Integration tests for the order endpoints via TestClient."""

import pytest

GUEST_INFO = {
    "email": "guest@example.com",
    "name": "Guest",
    "address": {
        "province": "San Jose",
        "canton": "Escazu",
        "district": "San Rafael",
        "reference": "Casa verde",
    },
}


@pytest.fixture(autouse=True)
def _data(catalog, customers):
    pass


def _fill_cart(client, customer_id=1):
    response = client.post(
        "/cart/items",
        params={"customer_id": customer_id},
        json={"product_id": "P1", "quantity": 2},
    )
    assert response.status_code == 200


def _checkout(client, address_id, customer_id=1):
    return client.post("/orders/checkout", params={"customer_id": customer_id}, json={"address_id": address_id})


def _guest_checkout(client, items=None, guest_info=GUEST_INFO):
    items = items if items is not None else [{"product_id": "P2", "quantity": 1, "unit_price": "15"}]
    return client.post("/orders/guest-checkout", json={"guest_info": guest_info, "items": items})


class TestCheckout:
    def test_checkout(self, client, customers):
        _fill_cart(client)
        response = _checkout(client, customers["alice_address"])

        assert response.status_code == 201
        order = response.json()["order"]
        assert order["status"] == "Pending"
        assert float(order["total"]) == 20.0
        assert order["is_guest_order"] is False
        assert order["customer"]["email"] == "alice@example.com"
        assert order["address"]["district"] == "San Rafael"
        assert order["lines"][0]["product_name"] == "Noir Absolu Extrait 50ml"

    def test_empty_cart(self, client, customers):
        response = _checkout(client, customers["alice_address"])
        assert response.status_code == 400
        assert response.json()["detail"] == "The cart is empty"

    def test_foreign_address(self, client, customers):
        _fill_cart(client)
        assert _checkout(client, customers["bob_address"]).status_code == 400

    def test_missing_address(self, client):
        _fill_cart(client)
        assert _checkout(client, None).status_code == 400


class TestGuestCheckout:
    def test_guest_checkout(self, client):
        response = _guest_checkout(client)

        assert response.status_code == 201
        order = response.json()["order"]
        assert float(order["total"]) == 15.0
        assert order["status"] == "Pending"
        assert order["is_guest_order"] is True
        assert order["guest_address"] == "San Jose, Escazu, San Rafael. Ref: Casa verde"
        assert order["customer"] is None

    def test_incomplete_guest_info(self, client):
        response = _guest_checkout(client, guest_info={"email": "guest@example.com", "name": "Guest"})
        assert response.status_code == 400

    def test_empty_items(self, client):
        assert _guest_checkout(client, items=[]).status_code == 400

    def test_insufficient_stock(self, client):
        response = _guest_checkout(client, items=[{"product_id": "P2", "quantity": 9, "unit_price": "15"}])
        assert response.status_code == 409


class TestOrderLifecycle:
    def test_history_and_detail(self, client, customers):
        _fill_cart(client)
        order_id = _checkout(client, customers["alice_address"]).json()["order"]["id"]

        history = client.get("/orders/history", params={"customer_id": 1}).json()
        assert [o["id"] for o in history] == [order_id]

        assert client.get(f"/orders/{order_id}", params={"customer_id": 1}).status_code == 200
        assert client.get(f"/orders/{order_id}", params={"customer_id": 2}).status_code == 403
        assert client.get("/orders/999", params={"customer_id": 1}).status_code == 404

    def test_admin_listing_and_detail(self, client):
        order_id = _guest_checkout(client).json()["order"]["id"]

        orders = client.get("/orders/admin/all").json()
        assert [o["id"] for o in orders] == [order_id]
        assert client.get(f"/orders/admin/{order_id}").json()["guest_email"] == "guest@example.com"

    def test_update_status(self, client):
        order_id = _guest_checkout(client).json()["order"]["id"]

        response = client.put(f"/orders/admin/{order_id}/status", json={"status": "Shipped"})
        assert response.status_code == 200
        assert response.json()["status"] == "Shipped"

    def test_invalid_status_keeps_previous(self, client):
        order_id = _guest_checkout(client).json()["order"]["id"]

        response = client.put(f"/orders/admin/{order_id}/status", json={"status": "NotAStatus"})
        assert response.status_code == 400
        assert client.get(f"/orders/admin/{order_id}").json()["status"] == "Pending"

    def test_status_of_missing_order(self, client):
        response = client.put("/orders/admin/999/status", json={"status": "Shipped"})
        assert response.status_code == 404
