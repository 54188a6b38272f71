"""Product DRF serializers for API output.

Input is validated by ``ProductInputDTO`` (see ``validators.py``); the
serializer only renders stored products using the API's camelCase field
names.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    inStock = serializers.BooleanField(source="in_stock", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "category",
            "inStock",
            "createdAt",
        ]
