"""Product model.

Business rules implemented:
- Product name is unique (UNIQUE constraint, backs the create-time check).
- Price must be greater than zero (CHECK constraint).
- Hard delete: rows are removed, never tombstoned.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Catalog product.

    ``name`` matching is case-sensitive: "Widget" and "widget" are two
    distinct products.
    """

    name = models.CharField(max_length=255, unique=True)
    price = models.FloatField()
    category = models.CharField(max_length=255)
    in_stock = models.BooleanField()

    class Meta:
        db_table = "products"
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["category"], name="products_category_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.category})"
