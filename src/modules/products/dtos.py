"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``) and accept both the
camelCase wire names (``productCode``) and the snake_case field names.

- ``CreateProductDTO``: the full set of field constraints; used for
  creation and to re-validate merged records on update.
- ``UpdateProductDTO``: partial update input, types only.
- ``ProductQueryDTO``: listing filters and page window.
- ``PaginationDTO`` / ``ProductPageDTO``: listing output.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
# page * limit stays within a signed 64-bit SQL OFFSET
MAX_PAGE = 2**31 - 1
MAX_LIMIT = 2**31 - 1

CODE_MAX_LENGTH = 64
TEXT_MAX_LENGTH = 255

_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    alias_generator=to_camel,
    str_strip_whitespace=True,
)


def validation_errors(exc: ValidationError) -> List[Dict[str, str]]:
    """Flatten a pydantic ``ValidationError`` into ``{field, message}`` pairs."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]) or "__all__",
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO holding a complete, valid product record.

    Validates:
    - ``product_code`` (at most 64 characters), ``product_description``
      and ``location`` (at most 255) are non-empty strings; surrounding
      whitespace is stripped first.
    - ``price`` is a decimal ``>= 0`` with at most two decimal places.
    """

    model_config = _CONFIG

    product_code: str = Field(max_length=CODE_MAX_LENGTH)
    product_description: str = Field(max_length=TEXT_MAX_LENGTH)
    location: str = Field(max_length=TEXT_MAX_LENGTH)
    price: Decimal = Field(max_digits=12, decimal_places=2)

    @field_validator("product_code", "product_description", "location")
    @classmethod
    def must_not_be_blank(cls, v: str, info) -> str:
        if not v:
            raise PydanticCustomError(
                "blank_string", "{field} must not be empty", {"field": info.field_name}
            )
        return v

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise PydanticCustomError("negative_price", "Price must not be negative")
        return v


class UpdateProductDTO(BaseModel):
    """Immutable DTO for partial product updates.

    All fields are optional; only the fields present in the input are
    applied (see ``supplied_fields``).  Values are type-checked here and
    fully re-validated by the service once merged with the stored record.
    ``productCode`` is not an updatable field and is ignored if sent.
    """

    model_config = _CONFIG

    product_description: Optional[str] = None
    location: Optional[str] = None
    price: Optional[Decimal] = None

    def supplied_fields(self) -> Dict[str, Any]:
        """Return the fields explicitly present in the input, by field name."""
        return self.model_dump(exclude_unset=True)


class ProductQueryDTO(BaseModel):
    """Immutable DTO for product listing: exact-match filters plus page window."""

    model_config = _CONFIG

    product_code: Optional[str] = None
    location: Optional[str] = None
    page: int = Field(default=DEFAULT_PAGE, ge=1, le=MAX_PAGE)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def filters(self) -> Dict[str, str]:
        """Filter values keyed by their query-parameter names, blanks dropped."""
        filters = {"productCode": self.product_code, "location": self.location}
        return {key: value for key, value in filters.items() if value}


class ProductLookupDTO(BaseModel):
    """Immutable DTO identifying a product by code and/or surrogate id."""

    model_config = _CONFIG

    product_code: Optional[str] = None
    id: Optional[int] = Field(default=None, ge=1)

    @field_validator("product_code")
    @classmethod
    def blank_code_is_absent(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class PaginationDTO(BaseModel):
    """Page metadata; ``total_items`` ignores the page window."""

    model_config = _CONFIG

    total_items: int
    current_page: int
    page_size: int
    total_pages: int

    @classmethod
    def build(cls, total_items: int, page: int, limit: int) -> PaginationDTO:
        return cls(
            total_items=total_items,
            current_page=page,
            page_size=limit,
            total_pages=math.ceil(total_items / limit),
        )


class ProductPageDTO(BaseModel):
    """One page of products (model instances) with its pagination block."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    data: List[Any]
    pagination: PaginationDTO
