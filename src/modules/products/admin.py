from django.contrib import admin

from modules.products.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("id", "product_code", "product_description", "location", "price")
    list_filter = ("location",)
    search_fields = ("product_code", "product_description")
    ordering = ("id",)

    def get_readonly_fields(self, request, obj=None):
        # product_code is the business key; fixed once the row exists
        if obj is not None:
            return ("product_code",)
        return ()
