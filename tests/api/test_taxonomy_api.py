"""
API tests for labels, products and preferences.

Tests cover:
- Adding and listing labels/products
- Duplicates and caps (409)
- Idempotent product removal
- Preferences defaults and validation
"""

from fastapi.testclient import TestClient


class TestLabelsAPI:

    def test_add_and_list(self, client: TestClient):
        assert client.post("/labels", json={"label": " Food "}).status_code == 204
        client.post("/labels", json={"label": "Rent"})

        assert client.get("/labels").json() == ["Food", "Rent"]

    def test_duplicate_returns_409(self, client: TestClient):
        client.post("/labels", json={"label": "Food"})

        response = client.post("/labels", json={"label": "Food"})

        assert response.status_code == 409

    def test_fifty_first_returns_409(self, client: TestClient):
        for i in range(50):
            client.post("/labels", json={"label": f"l{i}"})

        response = client.post("/labels", json={"label": "overflow"})

        assert response.status_code == 409
        assert response.json()["error"] == "CAPACITY_EXCEEDED"


class TestProductsAPI:

    def test_add_list_remove(self, client: TestClient):
        client.post("/products", json={"product": "Checking"})
        client.post("/products", json={"product": "Savings"})

        assert client.delete("/products/Checking").status_code == 204
        assert client.get("/products").json() == ["Savings"]

    def test_remove_absent_product_returns_204(self, client: TestClient):
        """
        GIVEN no products
        WHEN I DELETE /products/x
        THEN response is 204 and nothing changes
        """
        response = client.delete("/products/x")

        assert response.status_code == 204
        assert client.get("/products").json() == []

    def test_remove_product_containing_slash(self, client: TestClient):
        """
        GIVEN a product whose name contains "/"
        WHEN I DELETE it with the slash percent-encoded
        THEN response is 204 and the product is gone
        """
        client.post("/products", json={"product": "Savings/Checking"})

        response = client.delete("/products/Savings%2FChecking")

        assert response.status_code == 204
        assert client.get("/products").json() == []

    def test_remove_absent_product_containing_slash_returns_204(self, client: TestClient):
        client.post("/products", json={"product": "Brokerage"})

        response = client.delete("/products/Retirement/IRA")

        assert response.status_code == 204
        assert client.get("/products").json() == ["Brokerage"]


class TestPreferencesAPI:

    def test_defaults(self, client: TestClient):
        response = client.get("/preferences")

        assert response.status_code == 200
        assert response.json() == {
            "default_currency": "USD",
            "timezone": "UTC",
            "notification_enabled": True,
            "polling_interval_seconds": 60,
            "theme": "light",
        }

    def test_update(self, client: TestClient):
        response = client.put("/preferences", json={"timezone": "Europe/Zurich", "theme": "dark"})

        assert response.status_code == 200
        assert client.get("/preferences").json()["timezone"] == "Europe/Zurich"
        assert client.get("/preferences").json()["theme"] == "dark"

    def test_unknown_timezone_returns_400(self, client: TestClient):
        response = client.put("/preferences", json={"timezone": "Nowhere/Land"})

        assert response.status_code == 400


class TestHealthAPI:

    def test_health_needs_no_identity(self, client: TestClient):
        del client.headers["X-Identity"]

        assert client.get("/health").json() == {"status": "healthy"}
