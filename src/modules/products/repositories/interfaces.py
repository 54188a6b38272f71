"""Product repository interface.

Extends ``IRepository[Product]`` with the windowed read, count and
exact-name look-up needed by the list endpoint and the duplicate-name rule.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def list_page(
        self,
        offset: int,
        limit: int,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Product]:
        """Return up to ``limit`` products starting at ``offset``, in store order."""

    @abstractmethod
    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count products matching ``filters`` (all products when omitted)."""

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Product]:
        """Retrieve a product by exact, case-sensitive name."""
