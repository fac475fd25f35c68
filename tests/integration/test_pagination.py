"""Integration tests for paginated product listing.

Verifies the ``pagination`` block and page windows of GET /product.
"""

from __future__ import annotations

import pytest
from django.test import override_settings

pytestmark = pytest.mark.integration


@pytest.fixture()
def five_products(make_product):
    return [make_product(product_code=f"P{i}") for i in range(1, 6)]


class TestProductPagination:
    def test_two_products_default_window(self, api_client, make_product):
        make_product(product_code="P1")
        make_product(product_code="P2")

        response = api_client.get("/product")

        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 2
        assert body["pagination"] == {
            "totalItems": 2,
            "currentPage": 1,
            "pageSize": 10,
            "totalPages": 1,
        }

    def test_page_window(self, api_client, five_products):
        response = api_client.get("/product", {"page": 2, "limit": 2})

        body = response.json()
        assert [item["productCode"] for item in body["data"]] == ["P3", "P4"]
        assert body["pagination"] == {
            "totalItems": 5,
            "currentPage": 2,
            "pageSize": 2,
            "totalPages": 3,
        }

    def test_last_partial_page(self, api_client, five_products):
        response = api_client.get("/product", {"page": 3, "limit": 2})

        assert [item["productCode"] for item in response.json()["data"]] == ["P5"]

    def test_page_beyond_end_is_empty(self, api_client, five_products):
        response = api_client.get("/product", {"page": 10, "limit": 2})

        body = response.json()
        assert response.status_code == 200
        assert body["data"] == []
        assert body["pagination"]["totalItems"] == 5
        assert body["pagination"]["currentPage"] == 10

    def test_results_ordered_by_id(self, api_client, make_product):
        make_product(product_code="Z")
        make_product(product_code="A")

        codes = [item["productCode"] for item in api_client.get("/product").json()["data"]]

        assert codes == ["Z", "A"]

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"page": "x"}])
    def test_invalid_window_returns_400(self, api_client, params):
        response = api_client.get("/product", params)

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid query parameters"

    @pytest.mark.parametrize("params", [{"page": 10**19}, {"limit": 10**19}])
    def test_out_of_range_window_returns_400(self, api_client, params):
        response = api_client.get("/product", params)

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid query parameters"

    @override_settings(PRODUCT_DEFAULT_PAGE_SIZE=3)
    def test_default_limit_from_settings(self, api_client, five_products):
        body = api_client.get("/product").json()

        assert len(body["data"]) == 3
        assert body["pagination"]["pageSize"] == 3
