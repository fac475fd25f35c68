"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet bound to
``/product`` and ``/product/single``.  Every action except ``list`` is
gated on the caller's role header.  Domain exceptions are caught and
translated into HTTP status codes; the view never swallows generic
exceptions.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from django.conf import settings
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.authentication import HasRequiredRole
from modules.products.dtos import (
    CreateProductDTO,
    ProductLookupDTO,
    ProductQueryDTO,
    UpdateProductDTO,
    validation_errors,
)
from modules.products.exceptions import (
    ProductAlreadyExists,
    ProductLookupRequired,
    ProductNotFound,
    ProductValidationError,
)
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    DeleteResultSerializer,
    ErrorSerializer,
    ProductCreateRequestSerializer,
    ProductPageSerializer,
    ProductSerializer,
    ProductUpdateRequestSerializer,
)
from modules.products.services import ProductService

READ_ACTIONS = {"list", "single"}

PRODUCT_CODE_PARAM = OpenApiParameter(
    "productCode", OpenApiTypes.STR, OpenApiParameter.QUERY, required=True
)


def _error(
    detail: str, status_code: int, errors: Optional[List[Dict[str, str]]] = None
) -> Response:
    body: Dict[str, Any] = {"detail": detail}
    if errors is not None:
        body["errors"] = errors
    return Response(body, status=status_code)


def _payload(request: Request) -> Any:
    data = request.data
    return data.dict() if hasattr(data, "dict") else data


def _query(request: Request, *names: str) -> Dict[str, str]:
    """Non-blank query parameters among ``names``, stripped."""
    params = request.query_params
    values = {name: params.get(name, "").strip() for name in names}
    return {name: value for name, value in values.items() if value}


class ProductViewSet(GenericViewSet):
    """ViewSet for the product catalog.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def get_permissions(self):
        if self.action == "list":
            return [AllowAny()]
        return [HasRequiredRole()]

    def get_throttles(self):
        self.throttle_scope = (
            "product_read" if self.action in READ_ACTIONS else "product_write"
        )
        return super().get_throttles()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Get products by productCode and location",
        parameters=[
            OpenApiParameter("productCode", OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter("location", OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter("page", OpenApiTypes.INT, OpenApiParameter.QUERY),
            OpenApiParameter("limit", OpenApiTypes.INT, OpenApiParameter.QUERY),
        ],
        responses={200: ProductPageSerializer, 400: ErrorSerializer},
    )
    def list(self, request: Request) -> Response:
        """GET /product"""
        params: Dict[str, Any] = _query(
            request, "productCode", "location", "page", "limit"
        )
        params.setdefault("limit", settings.PRODUCT_DEFAULT_PAGE_SIZE)
        try:
            query = ProductQueryDTO.model_validate(params)
        except PydanticValidationError as exc:
            return _error(
                "Invalid query parameters",
                status.HTTP_400_BAD_REQUEST,
                validation_errors(exc),
            )

        page = self._service.list_products(query)
        return Response(
            {
                "data": ProductSerializer(page.data, many=True).data,
                "pagination": page.pagination.model_dump(by_alias=True),
            }
        )

    @extend_schema(
        summary="Get a single product by productCode (Admin only)",
        parameters=[PRODUCT_CODE_PARAM],
        responses={200: ProductSerializer, 400: ErrorSerializer, 404: ErrorSerializer},
    )
    def single(self, request: Request) -> Response:
        """GET /product/single"""
        product_code = _query(request, "productCode").get("productCode")
        if product_code is None:
            return _error("productCode is required", status.HTTP_400_BAD_REQUEST)
        try:
            product = self._service.get_product_by_code(product_code)
        except ProductNotFound as exc:
            return _error(str(exc), status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Create a new product (Admin only)",
        request=ProductCreateRequestSerializer,
        responses={201: ProductSerializer, 400: ErrorSerializer, 409: ErrorSerializer},
    )
    def create(self, request: Request) -> Response:
        """POST /product"""
        try:
            dto = CreateProductDTO.model_validate(_payload(request))
        except PydanticValidationError as exc:
            return _error(
                "Input data validation failed",
                status.HTTP_400_BAD_REQUEST,
                validation_errors(exc),
            )

        try:
            product = self._service.create_product(dto)
        except ProductAlreadyExists as exc:
            return _error(str(exc), status.HTTP_409_CONFLICT)

        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Update a product by productCode (Admin only)",
        parameters=[PRODUCT_CODE_PARAM],
        request=ProductUpdateRequestSerializer,
        responses={200: ProductSerializer, 400: ErrorSerializer, 404: ErrorSerializer},
    )
    def partial_update(self, request: Request) -> Response:
        """PATCH /product"""
        product_code = _query(request, "productCode").get("productCode")
        if product_code is None:
            return _error("productCode is required", status.HTTP_400_BAD_REQUEST)

        try:
            dto = UpdateProductDTO.model_validate(_payload(request))
        except PydanticValidationError as exc:
            return _error(
                "Input data validation failed",
                status.HTTP_400_BAD_REQUEST,
                validation_errors(exc),
            )

        try:
            product = self._service.update_product_by_code(product_code, dto)
        except ProductNotFound as exc:
            return _error(str(exc), status.HTTP_404_NOT_FOUND)
        except ProductValidationError as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST, exc.errors)

        return Response(ProductSerializer(product).data)

    @extend_schema(
        summary="Delete a product by productCode or id (Admin only)",
        parameters=[
            OpenApiParameter("productCode", OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter("id", OpenApiTypes.INT, OpenApiParameter.QUERY),
        ],
        responses={
            200: DeleteResultSerializer,
            400: ErrorSerializer,
            404: ErrorSerializer,
        },
    )
    def destroy(self, request: Request) -> Response:
        """DELETE /product"""
        try:
            lookup = ProductLookupDTO.model_validate(_query(request, "productCode", "id"))
        except PydanticValidationError as exc:
            return _error(
                "Invalid query parameters",
                status.HTTP_400_BAD_REQUEST,
                validation_errors(exc),
            )

        try:
            result = self._service.delete_product(lookup.product_code, lookup.id)
        except ProductLookupRequired as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)
        except ProductNotFound as exc:
            return _error(str(exc), status.HTTP_404_NOT_FOUND)

        return Response(result)
