"""Unit tests for Product serializers (response shaping only)."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.serializers import ProductCreateRequestSerializer, ProductSerializer

pytestmark = pytest.mark.unit


class TestProductSerializer:
    def test_camel_case_keys(self, make_product):
        product = make_product()
        data = ProductSerializer(product).data
        assert set(data) == {"id", "productCode", "productDescription", "location", "price"}

    def test_values(self, make_product):
        product = make_product()
        data = ProductSerializer(product).data
        assert data["id"] == product.id
        assert data["productCode"] == "P12345"
        assert data["productDescription"] == "Sample Product"
        assert data["location"] == "Warehouse A"

    def test_price_is_a_number(self, make_product):
        product = make_product(price=Decimal("150.00"))
        data = ProductSerializer(product).data
        assert data["price"] == Decimal("150.00")
        assert not isinstance(data["price"], str)

    def test_many(self, make_product):
        products = [make_product(product_code="P1"), make_product(product_code="P2")]
        data = ProductSerializer(products, many=True).data
        assert [item["productCode"] for item in data] == ["P1", "P2"]


class TestProductCreateRequestSerializer:
    def test_describes_required_fields(self):
        fields = ProductCreateRequestSerializer().fields
        assert all(fields[name].required for name in fields)
        assert set(fields) == {"productCode", "productDescription", "location", "price"}
