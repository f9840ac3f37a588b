"""
API tests for transaction label and custom transaction endpoints.

Tests cover:
- Transaction label upsert
- Custom transaction create/update/delete
- Derived ids and id conflicts (409)
"""

from fastapi.testclient import TestClient

from tests.conftest import FIXED_EPOCH_SECONDS


class TestTransactionLabelsAPI:
    """Tests for /transaction-labels."""

    def test_set_twice_keeps_latest(self, client: TestClient):
        client.put("/transaction-labels", json={"transaction_id": 77, "label": "Groceries"})
        response = client.put("/transaction-labels", json={"transaction_id": 77, "label": "Dining"})

        assert response.status_code == 204
        assert client.get("/transaction-labels").json() == [
            {"transaction_id": 77, "label": "Dining"},
        ]

    def test_negative_id_returns_422(self, client: TestClient):
        response = client.put("/transaction-labels", json={"transaction_id": -1, "label": "x"})

        assert response.status_code == 422

    def test_empty_label_returns_400(self, client: TestClient):
        response = client.put("/transaction-labels", json={"transaction_id": 1, "label": " "})

        assert response.status_code == 400


class TestCustomTransactionsAPI:
    """Tests for /custom-transactions."""

    def test_create_with_blank_id_derives_one(self, client: TestClient):
        """
        GIVEN a fixed clock
        WHEN I POST a custom transaction without id
        THEN response is 201 with id C#<epoch seconds>
        """
        response = client.post("/custom-transactions", json={
            "timestamp_ms": 1_700_000_000_000,
            "label": "Rent",
            "amount": 1200,
        })

        assert response.status_code == 201
        assert response.json() == {"id": f"C#{FIXED_EPOCH_SECONDS}"}

    def test_second_blank_id_in_same_second_returns_409(self, client: TestClient, fixed_clock):
        body = {"timestamp_ms": 1, "label": "Rent", "amount": 1}
        client.post("/custom-transactions", json=body)

        response = client.post("/custom-transactions", json=body)

        assert response.status_code == 409
        assert response.json()["error"] == "TRANSACTION_ID_CONFLICT"

        fixed_clock.advance(1)
        assert client.post("/custom-transactions", json=body).status_code == 201
        assert len(client.get("/custom-transactions").json()) == 2

    def test_create_with_account(self, client: TestClient):
        client.post("/custom-transactions", json={
            "id": "cash-1",
            "timestamp_ms": 5,
            "label": "Cash",
            "amount": 10,
            "account": {"kind": "offchain", "address": "wallet"},
        })

        data = client.get("/custom-transactions").json()

        assert data == [{
            "id": "cash-1",
            "timestamp_ms": 5,
            "label": "Cash",
            "amount": 10,
            "account": {"kind": "offchain", "address": "wallet"},
        }]

    def test_update(self, client: TestClient):
        client.post("/custom-transactions", json={"id": "r1", "timestamp_ms": 1, "label": "Rent", "amount": 1})

        response = client.put("/custom-transactions", json={
            "id": "r1",
            "timestamp_ms": 2,
            "label": "Rent (March)",
            "amount": 3,
        })

        assert response.status_code == 204
        data = client.get("/custom-transactions").json()
        assert data[0]["label"] == "Rent (March)"
        assert data[0]["amount"] == 3

    def test_update_unknown_returns_404(self, client: TestClient):
        response = client.put("/custom-transactions", json={
            "id": "missing",
            "timestamp_ms": 1,
            "label": "x",
            "amount": 1,
        })

        assert response.status_code == 404

    def test_delete(self, client: TestClient):
        client.post("/custom-transactions", json={"id": "r1", "timestamp_ms": 1, "label": "Rent", "amount": 1})

        assert client.delete("/custom-transactions/r1").status_code == 204
        assert client.get("/custom-transactions").json() == []
        assert client.delete("/custom-transactions/r1").status_code == 404

    def test_amount_out_of_range_returns_422(self, client: TestClient):
        response = client.post("/custom-transactions", json={
            "timestamp_ms": 1,
            "label": "x",
            "amount": 2**64,
        })

        assert response.status_code == 422

    def test_delete_id_containing_slash(self, client: TestClient):
        """
        GIVEN a custom transaction with id "inv/42"
        WHEN I DELETE it with the slash percent-encoded
        THEN response is 204 and the transaction is gone
        """
        client.post("/custom-transactions", json={
            "id": "inv/42",
            "timestamp_ms": 1,
            "label": "Invoice",
            "amount": 1,
        })

        response = client.delete("/custom-transactions/inv%2F42")

        assert response.status_code == 204
        assert client.get("/custom-transactions").json() == []
        assert client.delete("/custom-transactions/inv/42").status_code == 404
