import pytest

from rest_framework.test import APIClient

from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_product():
    """Factory that persists a Product, overriding any default field."""

    def _make(**overrides) -> Product:
        defaults = {
            "name": "Widget",
            "price": 19.99,
            "category": "Gadgets",
            "in_stock": True,
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make


@pytest.fixture()
def seed_products():
    """Bulk-insert ``count`` numbered products, mirroring ``seed_products``."""

    def _seed(count: int) -> list[Product]:
        return Product.objects.bulk_create(
            Product(
                name=f"Product {idx}",
                price=float(idx * count),
                category=f"Category {idx}",
                in_stock=True,
            )
            for idx in range(1, count + 1)
        )

    return _seed
