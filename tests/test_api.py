"""End-to-end tests for the HTTP API over SQLite."""

from unittest.mock import patch

import pytest

from catalog.services.product_service import REPORT_CACHE_KEY


@pytest.fixture
def tools(client):
    response = client.post("/categories", json={"name": "Tools", "description": "Hand tools"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def hammer(client, tools):
    response = client.post("/products", json={
        "name": "Hammer",
        "description": "Claw hammer",
        "price": 10,
        "stock_quantity": 5,
        "is_active": True,
        "category_id": tools["id"],
    })
    assert response.status_code == 201
    return response.json()


class TestRootEndpoints:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "cache": "disabled"}

    def test_root(self, client):
        assert client.get("/").json()["docs"] == "/docs"


class TestCatalogWorkflow:

    def test_category_gets_first_id(self, tools):
        assert tools["id"] == 1
        assert tools["name"] == "Tools"

    def test_list_report_edit_cycle(self, cached_client, hammer, fake_redis):
        client = cached_client

        listing = client.get("/products", params={"page": 1, "limit": 10}).json()
        assert listing["total_items"] == 1
        assert listing["total_pages"] == 1
        assert listing["data"][0]["name"] == "Hammer"
        assert listing["data"][0]["category"]["name"] == "Tools"

        assert client.get("/products", params={"price_min": 15}).json()["data"] == []

        report = client.get("/products/report").json()
        assert report["total_products"] == 1
        assert report["total_stock"] == 5
        assert report["average_price"] == 10.0
        assert report["products"][0]["category_name"] == "Tools"
        assert REPORT_CACHE_KEY in fake_redis.store

        response = client.put(f"/products/{hammer['id']}", json={"price": 20})
        assert response.status_code == 200
        assert response.json()["price"] == 20
        assert response.json()["stock_quantity"] == 5
        assert REPORT_CACHE_KEY not in fake_redis.store

        assert client.get("/products/report").json()["average_price"] == 20.0
        filtered = client.get("/products", params={"price_min": 15}).json()
        assert [p["name"] for p in filtered["data"]] == ["Hammer"]

    def test_cached_report_is_served_without_the_store(self, cached_client, hammer):
        first = cached_client.get("/products/report")

        with patch("catalog.repositories.product_repository.ProductRepository.get_product_report") as compute:
            second = cached_client.get("/products/report")

        compute.assert_not_called()
        assert second.content == first.content

    def test_report_on_empty_catalog(self, client):
        report = client.get("/products/report").json()

        assert report == {"total_products": 0, "total_stock": 0, "average_price": 0.0, "products": []}

    def test_delete_product(self, client, hammer):
        response = client.delete(f"/products/{hammer['id']}")

        assert response.status_code == 200
        assert client.get(f"/products/{hammer['id']}").status_code == 404
        assert client.get("/products/all").json() == []

    def test_limit_is_clamped(self, client, hammer):
        listing = client.get("/products", params={"page": 0, "limit": 1000}).json()

        assert listing["page"] == 1
        assert listing["limit"] == 100

    def test_unknown_sort_column_is_not_an_error(self, client, hammer):
        response = client.get("/products", params={"sort_by": "password", "sort_order": "up"})

        assert response.status_code == 200
        assert response.json()["total_items"] == 1


class TestErrorMapping:

    def test_non_positive_id_is_bad_request(self, client):
        response = client.get("/products/0")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ARGUMENT"

    def test_missing_product_is_not_found(self, client):
        response = client.get("/products/42")

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_edit_missing_product_is_not_found(self, client):
        assert client.put("/products/42", json={"price": 3}).status_code == 404

    def test_validation_errors_are_reported_per_field(self, client, tools):
        response = client.post("/products", json={
            "description": "No name",
            "price": 0,
            "stock_quantity": -1,
            "category_id": tools["id"],
        })

        assert response.status_code == 400
        errors = response.json()["details"]["errors"]
        assert errors["name"] == "This field is required"
        assert errors["price"] == "Must be greater than 0"
        assert errors["stock_quantity"] == "Must be greater than or equal to 0"

    def test_unknown_category_is_a_store_error(self, client):
        response = client.post("/products", json={
            "name": "Saw",
            "description": "Cuts",
            "price": 12,
            "stock_quantity": 1,
            "category_id": 99,
        })

        assert response.status_code == 500
        assert response.json()["code"] == "STORE_ERROR"


class TestCategoriesAndUsers:

    def test_category_crud(self, client, tools):
        response = client.patch(f"/categories/{tools['id']}", json={"description": "Everything with a handle"})
        assert response.status_code == 200
        assert response.json()["name"] == "Tools"

        assert len(client.get("/categories").json()) == 1
        assert client.delete(f"/categories/{tools['id']}").status_code == 200
        assert client.get(f"/categories/{tools['id']}").status_code == 404

    def test_user_registration(self, client):
        response = client.post("/users", json={"username": "ana", "email": "ana@example.com"})

        assert response.status_code == 201
        user_id = response.json()["id"]
        assert client.get(f"/users/{user_id}").json()["username"] == "ana"
        assert [u["username"] for u in client.get("/users").json()] == ["ana"]

    def test_user_email_must_look_like_an_email(self, client):
        response = client.post("/users", json={"username": "ana", "email": "not-an-email"})

        assert response.status_code == 400
