"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising; the Service Layer decides how to translate a
missing entity into a domain error.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import structlog

from django.db import transaction

from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or non-integer IDs.
        """
        try:
            return Product.objects.filter(id=int(id)).first()
        except (TypeError, ValueError):
            return None

    def get_by_code(self, product_code: str) -> Optional[Product]:
        """Retrieve a product by its product code (exact, case-sensitive)."""
        return Product.objects.filter(product_code=product_code).first()

    def list(
        self, filters: Optional[Dict[str, str]], offset: int, limit: int
    ) -> Tuple[List[Product], int]:
        """Apply ``ProductFilter`` and slice one page in ascending ``id`` order.

        Example::

            repo.list({"location": "Warehouse A"}, offset=10, limit=10)
        """
        queryset = ProductFilter(
            data=filters or {}, queryset=Product.objects.order_by("id")
        ).qs
        total = queryset.count()
        items = list(queryset[offset : offset + limit])
        return items, total

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product.

        Runs in its own savepoint so a unique-constraint rejection leaves
        an enclosing transaction usable.
        """
        entity.save()
        logger.info(
            "product.saved",
            product_id=entity.id,
            product_code=entity.product_code,
        )
        return entity

    @transaction.atomic
    def delete(self, entity: Product) -> None:
        """Hard-delete a product."""
        product_id = entity.id
        entity.delete()
        logger.info("product.hard_deleted", product_id=product_id)
