from decimal import Decimal

import pytest
from django.core.cache import cache

from rest_framework.test import APIClient

from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _clear_cache():
    """Throttle counters live in the cache; start every test from zero."""
    cache.clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def admin_api_client():
    """APIClient sending the ``admin`` role header on every request."""
    client = APIClient()
    client.credentials(HTTP_X_USER_ROLE="admin")
    return client


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_product():
    """Factory persisting a Product with sensible defaults."""

    def _make(**overrides) -> Product:
        defaults = {
            "product_code": "P12345",
            "product_description": "Sample Product",
            "location": "Warehouse A",
            "price": Decimal("150.00"),
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make
