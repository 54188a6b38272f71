"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``ProductInputDTO``: the full set of writable fields, used by both
  create and update (update is a full replacement).
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

# Column widths of ``Product.name`` and ``Product.category``.
NAME_MAX_LENGTH = 255
CATEGORY_MAX_LENGTH = 255


class ProductInputDTO(BaseModel):
    """Immutable DTO for product create/replace requests.

    Field declaration order is the validation order: name, price,
    category, inStock.  Validation errors are reported in that order.

    Validates:
    - ``name`` and ``category`` are non-empty strings that fit their columns.
    - ``price`` is a finite number greater than zero (booleans and numeric
      strings are rejected).
    - ``inStock`` is a real boolean.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: StrictStr = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    price: float = Field(gt=0, allow_inf_nan=False)
    category: StrictStr = Field(min_length=1, max_length=CATEGORY_MAX_LENGTH)
    in_stock: StrictBool = Field(alias="inStock")

    @field_validator("price", mode="before")
    @classmethod
    def price_must_be_number(cls, v: Any) -> Any:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("Price must be a number.")
        return v

    def to_fields(self) -> Dict[str, Any]:
        """Model field values keyed by storage column name."""
        return {
            "name": self.name,
            "price": self.price,
            "category": self.category,
            "in_stock": self.in_stock,
        }
