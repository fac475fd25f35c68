"""Product repository interface.

Extends ``IRepository[Product]`` with the business-key look-up and the
filtered, windowed listing the product service needs.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_code(self, product_code: str) -> Optional[Product]:
        """Retrieve a product by its product code (exact match)."""

    @abstractmethod
    def list(
        self, filters: Optional[Dict[str, str]], offset: int, limit: int
    ) -> Tuple[List[Product], int]:
        """Return one window of matching products and the total match count.

        ``filters`` uses the listing query-parameter names
        (``productCode``, ``location``); absent or blank values do not filter.
        """
