from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

CATALOG = [
    ("ELEC-001", "Monitor 27\"", "Warehouse A", Decimal("1299.90")),
    ("ELEC-002", "Mechanical Keyboard", "Warehouse A", Decimal("399.90")),
    ("ELEC-003", "Gaming Mouse", "Warehouse A", Decimal("249.90")),
    ("ELEC-004", "Notebook 14\"", "Warehouse B", Decimal("3999.00")),
    ("ELEC-005", "Headset", "Warehouse B", Decimal("299.90")),
    ("FURN-001", "Office Desk", "Warehouse C", Decimal("899.00")),
    ("FURN-002", "Ergonomic Chair", "Warehouse C", Decimal("1499.00")),
    ("FURN-003", "Bookshelf", "Warehouse C", Decimal("699.00")),
    ("OFF-001", "A4 Paper", "Store Front", Decimal("29.90")),
    ("OFF-002", "Blue Pen", "Store Front", Decimal("4.90")),
    ("OFF-003", "Notebook", "Store Front", Decimal("19.90")),
    ("OFF-004", "Calculator", "Store Front", Decimal("89.90")),
]


class Command(BaseCommand):
    help = "Seed the catalog with demo products for local development."

    def handle(self, *args, **options):
        self.stdout.write("Creating products...")
        created = 0
        for product_code, description, location, price in CATALOG:
            _, was_created = Product.objects.get_or_create(
                product_code=product_code,
                defaults={
                    "product_description": description,
                    "location": location,
                    "price": price,
                },
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created}, skipped={len(CATALOG) - created}"
            )
        )
