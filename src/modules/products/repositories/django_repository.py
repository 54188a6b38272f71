"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
(or ``False``) instead of raising; the Service Layer decides how to
translate a missing entity into an API response.  ``DatabaseError`` and
``IntegrityError`` propagate unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import QuerySet

from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def _filtered(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet[Product]:
        queryset = Product.objects.all()
        if not filters:
            return queryset
        # Unknown keys and unparseable values are ignored by the FilterSet.
        return ProductFilter(filters, queryset=queryset).qs

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_name(self, name: str) -> Optional[Product]:
        return Product.objects.filter(name=name).first()

    def list_page(
        self,
        offset: int,
        limit: int,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Product]:
        """Slice the ordered queryset; Django turns this into OFFSET/LIMIT.

        ``filters`` uses the query-string keys of ``ProductFilter``::

            {"category": "Books"}
            {"inStock": "true", "name": "widget"}
        """
        return list(self._filtered(filters)[offset : offset + limit])

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        return self._filtered(filters).count()

    @transaction.atomic
    def create(self, fields: Dict[str, Any]) -> Product:
        """Insert a new product.

        Raises:
            IntegrityError: if the name is already taken.
        """
        product = Product(**fields)
        product.save(force_insert=True)
        return product

    @transaction.atomic
    def replace(self, id: str, fields: Dict[str, Any]) -> Optional[Product]:
        """Overwrite the writable fields of a product.

        Returns the refreshed product, or ``None`` if no row matched.

        Raises:
            IntegrityError: if the new name belongs to another product.
        """
        try:
            updated = Product.objects.filter(id=id).update(**fields)
        except (ValueError, ValidationError):
            return None
        if not updated:
            return None
        return Product.objects.get(id=id)

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` if no product
        exists with the given ID.
        """
        try:
            deleted, _ = Product.objects.filter(id=id).delete()
        except (ValueError, ValidationError):
            return False
        return bool(deleted)
