"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from typing import Dict, List


class ProductAlreadyExists(Exception):
    """A product with the same product code already exists."""


class ProductNotFound(Exception):
    """No product matches the requested code or id."""


class ProductLookupRequired(Exception):
    """Neither a product code nor an id was supplied to identify a product."""


class ProductValidationError(Exception):
    """A merged product record violates the field constraints.

    ``errors`` lists the violations as ``{"field": ..., "message": ...}``.
    """

    def __init__(self, message: str, errors: List[Dict[str, str]]) -> None:
        super().__init__(message)
        self.errors = errors
