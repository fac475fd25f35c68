import django_filters

from modules.products.models import Product


class ProductFilter(django_filters.FilterSet):
    """Exact-match filters for product listing; blank values are ignored."""

    productCode = django_filters.CharFilter(field_name="product_code", lookup_expr="exact")
    location = django_filters.CharFilter(field_name="location", lookup_expr="exact")

    class Meta:
        model = Product
        fields = []
