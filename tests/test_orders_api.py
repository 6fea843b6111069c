"""Tests for the order HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from northwind_orders.exceptions import InvalidArgumentError, RepositoryError
from northwind_orders.repositories import OrderRepository
from tests.factories import brief_order_payload


def _create(client: TestClient, **kwargs) -> int:
    response = client.post("/orders", json=brief_order_payload(**kwargs))
    assert response.status_code == 200
    return response.json()["orderId"]


class TestCreateOrder:

    def test_returns_generated_id(self, client: TestClient) -> None:
        response = client.post("/orders", json=brief_order_payload())

        assert response.status_code == 200
        assert response.json()["orderId"] > 0

    def test_malformed_body_is_rejected(self, client: TestClient) -> None:
        payload = brief_order_payload(lines=[{"productId": 7, "unitPrice": 1.0, "quantity": 0}])

        response = client.post("/orders", json=payload)

        assert response.status_code == 422

    @pytest.mark.parametrize(
        "overrides",
        [
            {"freight": 10.55555},
            {"lines": [{"productId": 7, "unitPrice": 9.99999, "quantity": 1, "discount": 0.0}]},
        ],
    )
    def test_money_beyond_four_decimal_places_is_rejected(self, client: TestClient, overrides: dict) -> None:
        response = client.post("/orders", json=brief_order_payload(**overrides))

        assert response.status_code == 422

    def test_repository_failure_is_500(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        def reject(self, order):
            raise InvalidArgumentError("Invalid product id in order detail")

        monkeypatch.setattr(OrderRepository, "add_order", reject)

        response = client.post("/orders", json=brief_order_payload())

        assert response.status_code == 500

    def test_duplicate_products_are_500(self, client: TestClient) -> None:
        line = {"productId": 7, "unitPrice": 9.99, "quantity": 1, "discount": 0.0}

        response = client.post("/orders", json=brief_order_payload(lines=[line, line]))

        assert response.status_code == 500


class TestGetOrder:

    def test_returns_full_representation(self, client: TestClient) -> None:
        order_id = _create(client)

        response = client.get(f"/orders/{order_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == order_id
        assert body["customer"]["code"] == "ALFKI"
        assert body["employee"]["id"] == 1
        assert body["shipper"]["id"] == 1
        assert body["freight"] == 10.5
        assert body["orderDate"] == "1996-07-04T00:00:00"
        assert body["shippedDate"] is None
        assert body["shippingAddress"]["country"] == "Germany"
        assert len(body["orderDetails"]) == 1
        assert body["orderDetails"][0]["productId"] == 7
        assert body["orderDetails"][0]["unitPrice"] == 9.99
        assert body["orderDetails"][0]["quantity"] == 2

    def test_money_fields_round_trip_beyond_cents(self, client: TestClient) -> None:
        lines = [{"productId": 7, "unitPrice": 9.995, "quantity": 1, "discount": 0.0}]
        order_id = _create(client, freight=10.555, lines=lines)

        body = client.get(f"/orders/{order_id}").json()

        assert body["freight"] == 10.555
        assert body["orderDetails"][0]["unitPrice"] == 9.995

    def test_missing_order_is_404(self, client: TestClient) -> None:
        response = client.get("/orders/999")

        assert response.status_code == 404

    def test_unexpected_failure_is_500(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken(self, order_id):
            raise RuntimeError("boom")

        monkeypatch.setattr(OrderRepository, "get_order", broken)

        response = client.get("/orders/1")

        assert response.status_code == 500


class TestListOrders:

    def test_returns_brief_representations_in_id_order(self, client: TestClient) -> None:
        ids = [_create(client) for _ in range(3)]

        response = client.get("/orders")

        assert response.status_code == 200
        body = response.json()
        assert [o["id"] for o in body] == ids
        assert body[0]["customerId"] == "ALFKI"
        assert body[0]["shipperId"] == 1
        assert body[0]["orderDetails"] == [{"productId": 7, "unitPrice": 9.99, "quantity": 2, "discount": 0.0}]

    def test_default_page_size_is_ten(self, client: TestClient) -> None:
        for _ in range(12):
            _create(client)

        assert len(client.get("/orders").json()) == 10

    def test_skip_and_count(self, client: TestClient) -> None:
        ids = [_create(client) for _ in range(4)]

        response = client.get("/orders", params={"skip": 1, "count": 2})

        assert [o["id"] for o in response.json()] == ids[1:3]

    @pytest.mark.parametrize("params", [{"skip": -1}, {"count": 0}])
    def test_bad_pagination_is_400(self, client: TestClient, params: dict) -> None:
        response = client.get("/orders", params=params)

        assert response.status_code == 400

    def test_storage_failure_is_500(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken(self, skip, count):
            raise RepositoryError("database unavailable")

        monkeypatch.setattr(OrderRepository, "get_orders", broken)

        assert client.get("/orders").status_code == 500


class TestReplaceOrder:

    def test_replaces_order(self, client: TestClient) -> None:
        order_id = _create(client)
        payload = brief_order_payload(
            order_id=order_id,
            freight=32.38,
            shipCity="Reims",
            lines=[{"productId": 11, "unitPrice": 14.0, "quantity": 12, "discount": 0.1}],
        )

        response = client.put(f"/orders/{order_id}", json=payload)

        assert response.status_code == 204
        body = client.get(f"/orders/{order_id}").json()
        assert body["freight"] == 32.38
        assert body["shippingAddress"]["city"] == "Reims"
        assert [d["productId"] for d in body["orderDetails"]] == [11]

    def test_replacing_with_no_lines(self, client: TestClient) -> None:
        order_id = _create(client)

        response = client.put(f"/orders/{order_id}", json=brief_order_payload(order_id=order_id, lines=[]))

        assert response.status_code == 204
        assert client.get(f"/orders/{order_id}").json()["orderDetails"] == []

    def test_id_mismatch_is_400(self, client: TestClient) -> None:
        order_id = _create(client)

        response = client.put(f"/orders/{order_id}", json=brief_order_payload(order_id=order_id + 1))

        assert response.status_code == 400

    def test_missing_order_is_404(self, client: TestClient) -> None:
        response = client.put("/orders/77", json=brief_order_payload(order_id=77))

        assert response.status_code == 404

    def test_missing_order_with_duplicate_lines_is_404(self, client: TestClient) -> None:
        line = {"productId": 7, "unitPrice": 9.99, "quantity": 1, "discount": 0.0}

        response = client.put("/orders/77", json=brief_order_payload(order_id=77, lines=[line, line]))

        assert response.status_code == 404

    def test_repository_failure_is_500(self, client: TestClient) -> None:
        order_id = _create(client)
        line = {"productId": 7, "unitPrice": 9.99, "quantity": 1, "discount": 0.0}

        response = client.put(f"/orders/{order_id}", json=brief_order_payload(order_id=order_id, lines=[line, line]))

        assert response.status_code == 500


class TestDeleteOrder:

    def test_deletes_order(self, client: TestClient) -> None:
        order_id = _create(client)

        response = client.delete(f"/orders/{order_id}")

        assert response.status_code == 204
        assert client.get(f"/orders/{order_id}").status_code == 404

    def test_missing_order_is_404(self, client: TestClient) -> None:
        assert client.delete("/orders/31337").status_code == 404
