"""Product model: the catalog's only entity.

Rules enforced at the store level:
- ``product_code`` is unique (UNIQUE index); it is the business key.
- ``price`` is never negative (CHECK constraint + field validator).
- ``id`` is an auto-increment surrogate key and is never reused.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class Product(models.Model):
    """Catalog product addressed by ``id`` or by ``product_code``."""

    product_code = models.CharField(max_length=64, unique=True)
    product_description = models.CharField(max_length=255)
    location = models.CharField(max_length=255)
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )

    class Meta:
        db_table = "product"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["location"], name="product_location_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="product_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.product_code} - {self.product_description}"
