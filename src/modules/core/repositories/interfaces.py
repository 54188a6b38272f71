"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def create(self, fields: Dict[str, Any]) -> T:
        """Insert a new entity; the store assigns id and timestamps."""

    @abstractmethod
    def replace(self, id: str, fields: Dict[str, Any]) -> Optional[T]:
        """Overwrite the mutable fields of an entity.

        Returns the updated entity, or ``None`` if nothing matched ``id``.
        """

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Remove an entity by ID (hard delete)."""
