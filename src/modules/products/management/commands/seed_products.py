from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.products.models import Product


class Command(BaseCommand):
    help = "Seed the catalog with numbered sample products."

    def add_arguments(self, parser):
        parser.add_argument(
            "--count",
            type=int,
            default=20,
            help="Number of products to create (default: 20).",
        )

    def handle(self, *args, **options):
        count = options["count"]
        self.stdout.write("Creating products...")

        created = 0
        for idx in range(1, count + 1):
            _, was_created = Product.objects.get_or_create(
                name=f"Product {idx}",
                defaults={
                    "price": float(idx * count),
                    "category": f"Category {idx}",
                    "in_stock": True,
                },
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created}, skipped={count - created}"
            )
        )
