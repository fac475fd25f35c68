"""Product DRF serializers for API output and schema documentation.

Input validation lives in the pydantic DTOs (``dtos.py``); these
serializers only shape responses (camelCase keys, numeric ``price``)
and describe request bodies for the OpenAPI schema.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    productCode = serializers.CharField(source="product_code", read_only=True)
    productDescription = serializers.CharField(
        source="product_description", read_only=True
    )
    price = serializers.DecimalField(
        max_digits=12, decimal_places=2, coerce_to_string=False, read_only=True
    )

    class Meta:
        model = Product
        fields = ["id", "productCode", "productDescription", "location", "price"]
        read_only_fields = fields


class ProductCreateRequestSerializer(serializers.Serializer):
    productCode = serializers.CharField(max_length=64)
    productDescription = serializers.CharField(max_length=255)
    location = serializers.CharField(max_length=255)
    price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, coerce_to_string=False
    )


class ProductUpdateRequestSerializer(serializers.Serializer):
    productDescription = serializers.CharField(max_length=255, required=False)
    location = serializers.CharField(max_length=255, required=False)
    price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=0,
        coerce_to_string=False,
        required=False,
    )


class PaginationSerializer(serializers.Serializer):
    totalItems = serializers.IntegerField()
    currentPage = serializers.IntegerField()
    pageSize = serializers.IntegerField()
    totalPages = serializers.IntegerField()


class ProductPageSerializer(serializers.Serializer):
    data = ProductSerializer(many=True)
    pagination = PaginationSerializer()


class DeleteResultSerializer(serializers.Serializer):
    status = serializers.CharField()
    message = serializers.CharField()


class FieldErrorSerializer(serializers.Serializer):
    field = serializers.CharField()
    message = serializers.CharField()


class ErrorSerializer(serializers.Serializer):
    detail = serializers.CharField()
    errors = FieldErrorSerializer(many=True, required=False)
