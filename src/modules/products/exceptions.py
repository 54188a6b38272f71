"""Product domain exceptions.

Raised by the validation rules and the Service Layer when a request or a
business rule is violated.  The API layer (Views) catches these and
translates them into HTTP responses; ``str(exc)`` is the user-facing
message.
"""

from __future__ import annotations


class ProductValidationError(Exception):
    """A product payload field failed validation.

    ``field`` names the wire field that was rejected.
    """

    field: str = ""
    default_message: str = "Invalid product"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidName(ProductValidationError):
    field = "name"
    default_message = "Invalid product name"


class InvalidPrice(ProductValidationError):
    field = "price"
    default_message = "Invalid price"


class InvalidCategory(ProductValidationError):
    field = "category"
    default_message = "Invalid category"


class InvalidStockStatus(ProductValidationError):
    field = "inStock"
    default_message = "Invalid stock status"


class InvalidProductId(Exception):
    """The path identifier is not a well-formed product ID."""

    def __init__(self, message: str = "Invalid product ID") -> None:
        super().__init__(message)


class ProductAlreadyExists(Exception):
    """A product with the same name already exists."""

    def __init__(self, message: str = "Product name already exists") -> None:
        super().__init__(message)


class ProductNotFound(Exception):
    """The requested product does not exist."""

    def __init__(self, message: str = "Product not found") -> None:
        super().__init__(message)
