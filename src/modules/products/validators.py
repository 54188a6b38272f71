"""Validation rules applied before any store access.

Each rule pairs a predicate with the domain error it raises.  Payload
rules run in the fixed order name -> price -> category -> inStock and
only the first violation is reported.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from modules.products.dtos import ProductInputDTO
from modules.products.exceptions import (
    InvalidCategory,
    InvalidName,
    InvalidPrice,
    InvalidProductId,
    InvalidStockStatus,
    ProductValidationError,
)

# Keyed by both the model field name and its wire alias.
FIELD_ERRORS: dict[str, type[ProductValidationError]] = {
    "name": InvalidName,
    "price": InvalidPrice,
    "category": InvalidCategory,
    "in_stock": InvalidStockStatus,
    "inStock": InvalidStockStatus,
}


def validate_product_payload(data: Any) -> ProductInputDTO:
    """Build a ``ProductInputDTO`` or raise the first field's domain error.

    A payload that is not a JSON object is treated as an empty one.
    """
    if not isinstance(data, Mapping):
        data = {}

    try:
        return ProductInputDTO.model_validate(dict(data))
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = first["loc"][0] if first["loc"] else "name"
        raise FIELD_ERRORS.get(str(field), InvalidName)() from exc


def is_valid_product_id(value: Any) -> bool:
    """Pure format predicate: is ``value`` a well-formed UUID string?"""
    if not isinstance(value, str):
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def validate_product_id(value: Any) -> str:
    """Return the canonical form of a product ID.

    Raises:
        InvalidProductId: if ``value`` is not a well-formed UUID.
    """
    if not is_valid_product_id(value):
        raise InvalidProductId()
    return str(uuid.UUID(value))
