"""Unit tests for ProductDjangoRepository.

Covers:
- Look-ups (get_by_id, get_by_code) including misses and bad ids.
- list: exact-match filters, id ordering, page window, total count.
- save / delete round trips against the test database.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


# ===========================================================================
# get_by_id / get_by_code
# ===========================================================================


class TestGetById:
    def test_returns_existing(self, repo, make_product):
        product = make_product()
        assert repo.get_by_id(product.id) == product

    def test_missing_returns_none(self, repo):
        assert repo.get_by_id(999999) is None

    def test_string_id_is_accepted(self, repo, make_product):
        product = make_product()
        assert repo.get_by_id(str(product.id)) == product

    def test_non_integer_returns_none(self, repo):
        assert repo.get_by_id("not-an-id") is None


class TestGetByCode:
    def test_returns_existing(self, repo, make_product):
        product = make_product(product_code="P1")
        assert repo.get_by_code("P1") == product

    def test_is_case_sensitive(self, repo, make_product):
        make_product(product_code="P1")
        assert repo.get_by_code("p1") is None

    def test_missing_returns_none(self, repo):
        assert repo.get_by_code("NOPE") is None


# ===========================================================================
# list
# ===========================================================================


class TestList:
    def test_no_filters_returns_all_in_id_order(self, repo, make_product):
        first = make_product(product_code="B")
        second = make_product(product_code="A")

        items, total = repo.list({}, 0, 10)

        assert items == [first, second]
        assert total == 2

    def test_filter_by_code(self, repo, make_product):
        make_product(product_code="P1")
        wanted = make_product(product_code="P2")

        items, total = repo.list({"productCode": "P2"}, 0, 10)

        assert items == [wanted]
        assert total == 1

    def test_filter_by_location(self, repo, make_product):
        a = make_product(product_code="P1", location="Warehouse A")
        make_product(product_code="P2", location="Warehouse B")
        c = make_product(product_code="P3", location="Warehouse A")

        items, total = repo.list({"location": "Warehouse A"}, 0, 10)

        assert items == [a, c]
        assert total == 2

    def test_location_is_exact_match(self, repo, make_product):
        make_product(location="Warehouse A")

        items, total = repo.list({"location": "Warehouse"}, 0, 10)

        assert items == []
        assert total == 0

    def test_filters_combine(self, repo, make_product):
        make_product(product_code="P1", location="Warehouse A")
        make_product(product_code="P2", location="Warehouse A")

        items, total = repo.list({"productCode": "P1", "location": "Warehouse B"}, 0, 10)

        assert items == []
        assert total == 0

    def test_window_and_total(self, repo, make_product):
        products = [make_product(product_code=f"P{i}") for i in range(5)]

        items, total = repo.list(None, 2, 2)

        assert items == products[2:4]
        assert total == 5

    def test_window_beyond_end_is_empty(self, repo, make_product):
        make_product()

        items, total = repo.list({}, 10, 10)

        assert items == []
        assert total == 1


# ===========================================================================
# save / delete
# ===========================================================================


class TestSave:
    def test_creates_with_id(self, repo):
        product = repo.save(
            Product(
                product_code="NEW",
                product_description="New",
                location="Warehouse A",
                price=Decimal("1.50"),
            )
        )
        assert product.id is not None
        assert Product.objects.filter(product_code="NEW").exists()

    def test_updates_existing(self, repo, make_product):
        product = make_product()
        product.price = Decimal("200.00")

        repo.save(product)

        product.refresh_from_db()
        assert product.price == Decimal("200.00")


class TestDelete:
    def test_removes_row(self, repo, make_product):
        product = make_product()
        product_id = product.id

        repo.delete(product)

        assert not Product.objects.filter(id=product_id).exists()

    def test_code_can_be_reused_after_delete(self, repo, make_product):
        repo.delete(make_product(product_code="P1"))

        again = make_product(product_code="P1")

        assert repo.get_by_code("P1") == again
