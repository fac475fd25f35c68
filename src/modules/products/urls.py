"""Product URL configuration.

Products are addressed through query parameters rather than path
segments, so the viewset actions are bound to two fixed routes.
"""

from __future__ import annotations

from django.urls import path

from modules.products.views import ProductViewSet

product_collection = ProductViewSet.as_view(
    {
        "get": "list",
        "post": "create",
        "patch": "partial_update",
        "delete": "destroy",
    }
)
product_single = ProductViewSet.as_view({"get": "single"})

urlpatterns = [
    path("product", product_collection, name="product"),
    path("product/single", product_single, name="product-single"),
]
