"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Rules enforced here:
- Product codes are unique.  The look-up before insert is only a fast
  path; the store's unique constraint is authoritative, so an integrity
  error on insert is re-checked and reported as a duplicate.
- Updates merge the supplied fields and re-validate the whole record;
  the product code never changes.
- Deletes resolve by product code first, then by id.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

import structlog
from django.db import IntegrityError, transaction
from pydantic import ValidationError

from modules.products.dtos import (
    CreateProductDTO,
    PaginationDTO,
    ProductPageDTO,
    validation_errors,
)
from modules.products.exceptions import (
    ProductAlreadyExists,
    ProductLookupRequired,
    ProductNotFound,
    ProductValidationError,
)
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import ProductQueryDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

DELETED_RESPONSE = {"status": "success", "message": "Product deleted"}


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product after enforcing code uniqueness.

        Raises:
            ProductAlreadyExists: if the product code is already taken.
        """
        log = logger.bind(product_code=dto.product_code)

        if self._repo.get_by_code(dto.product_code):
            log.warning("product.duplicate_code")
            raise ProductAlreadyExists(
                f"Product with code {dto.product_code} already exists"
            )

        product = Product(
            product_code=dto.product_code,
            product_description=dto.product_description,
            location=dto.location,
            price=dto.price,
        )
        try:
            product = self._repo.save(product)
        except IntegrityError:
            if self._repo.get_by_code(dto.product_code) is None:
                raise
            log.warning("product.duplicate_code", race=True)
            raise ProductAlreadyExists(
                f"Product with code {dto.product_code} already exists"
            ) from None

        log.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update_product_by_code(
        self, product_code: str, dto: UpdateProductDTO
    ) -> Product:
        """Merge the supplied fields into an existing product.

        Raises:
            ProductNotFound: if no product has ``product_code``.
            ProductValidationError: if the merged record breaks a field
                constraint; nothing is persisted in that case.
        """
        product = self.get_product_by_code(product_code)
        log = logger.bind(product_code=product_code, product_id=product.id)

        merged = {
            "product_code": product.product_code,
            "product_description": product.product_description,
            "location": product.location,
            "price": product.price,
        }
        merged.update(dto.supplied_fields())
        merged["product_code"] = product.product_code

        try:
            valid = CreateProductDTO(**merged)
        except ValidationError as exc:
            errors = validation_errors(exc)
            log.warning("product.validation_failed", errors=errors)
            raise ProductValidationError(
                "Input data validation failed", errors=errors
            ) from exc

        product.product_description = valid.product_description
        product.location = valid.location
        product.price = valid.price

        product = self._repo.save(product)
        log.info("product.updated", fields=sorted(dto.supplied_fields()))
        return product

    @transaction.atomic
    def delete_product(
        self, product_code: Optional[str] = None, id: Optional[int] = None
    ) -> Dict[str, str]:
        """Hard-delete a product identified by code or, failing that, by id.

        When both are given the product code wins.

        Raises:
            ProductLookupRequired: if neither identifier is given.
            ProductNotFound: if nothing matches the chosen identifier.
        """
        if not product_code and id is None:
            raise ProductLookupRequired("Either productCode or id must be provided")

        if product_code:
            product = self._repo.get_by_code(product_code)
            identifier = f"Product with code {product_code}"
        else:
            product = self._repo.get_by_id(id)
            identifier = f"Product with id {id}"

        if product is None:
            logger.info("product.not_found", lookup=identifier)
            raise ProductNotFound(f"{identifier} not found")

        deleted_id = product.id
        self._repo.delete(product)
        logger.info(
            "product.deleted", product_id=deleted_id, product_code=product.product_code
        )
        return dict(DELETED_RESPONSE)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, query: ProductQueryDTO) -> ProductPageDTO:
        """Return one page of products matching the query's filters."""
        items, total = self._repo.list(query.filters(), query.offset, query.limit)
        return ProductPageDTO(
            data=items,
            pagination=PaginationDTO.build(total, query.page, query.limit),
        )

    def get_product_by_code(self, product_code: str) -> Product:
        """Retrieve a single product by its product code.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_code(product_code)
        if not product:
            logger.info("product.not_found", product_code=product_code)
            raise ProductNotFound(f"Product with code {product_code} not found")
        return product
