"""Product service layer (Use Cases).

Orchestrates validation and persistence for the Product aggregate,
delegating storage to the injected ``IProductRepository``.

Business rules enforced here:
- Product IDs are checked for well-formedness before any store access.
- Product names are unique: checked before insert, and a unique-constraint
  violation from the store is reported the same way.
- Update is a full replacement and does not look up the name first.
- Delete is a hard delete.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.pagination import PageRequest, ProductPage
from modules.products.validators import validate_product_id

if TYPE_CHECKING:
    from modules.products.dtos import ProductInputDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: ProductInputDTO) -> Product:
        """Create a new product after enforcing name uniqueness.

        Raises:
            ProductAlreadyExists: if the name is already taken.
        """
        log = logger.bind(name=dto.name)

        if self._repo.get_by_name(dto.name):
            log.warning("product.duplicate_name")
            raise ProductAlreadyExists()

        try:
            product = self._repo.create(dto.to_fields())
        except IntegrityError as exc:
            # A concurrent create took the name between check and insert.
            log.warning("product.duplicate_name", source="constraint")
            raise ProductAlreadyExists() from exc

        log.info("product.created", product_id=str(product.id))
        return product

    @transaction.atomic
    def update_product(self, id: str, dto: ProductInputDTO) -> Product:
        """Replace every writable field of an existing product.

        Raises:
            InvalidProductId: if ``id`` is malformed.
            ProductNotFound: if the product does not exist.
            ProductAlreadyExists: if the new name belongs to another product.
        """
        product_id = validate_product_id(id)
        log = logger.bind(product_id=product_id)

        try:
            product = self._repo.replace(product_id, dto.to_fields())
        except IntegrityError as exc:
            log.warning("product.duplicate_name", source="constraint")
            raise ProductAlreadyExists() from exc

        if product is None:
            raise ProductNotFound()

        log.info("product.updated")
        return product

    @transaction.atomic
    def delete_product(self, id: str) -> None:
        """Hard-delete a product.

        Raises:
            InvalidProductId: if ``id`` is malformed.
            ProductNotFound: if the product does not exist.
        """
        product_id = validate_product_id(id)
        if not self._repo.delete(product_id):
            raise ProductNotFound()
        logger.info("product.deleted", product_id=product_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(
        self,
        page_request: PageRequest,
        filters: Optional[Dict[str, Any]] = None,
    ) -> ProductPage:
        """Return one pagination window and the total matching count.

        A window that starts past the last match is empty and is not sent
        to the store, so arbitrarily large pages never reach the OFFSET.
        """
        total = self._repo.count(filters)
        if page_request.offset >= total:
            items = []
        else:
            items = self._repo.list_page(page_request.offset, page_request.limit, filters)
        logger.info(
            "product.listed",
            page=page_request.page,
            limit=page_request.limit,
            returned=len(items),
            total=total,
        )
        return ProductPage(items=items, page_request=page_request, total=total)

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            InvalidProductId: if ``id`` is malformed.
            ProductNotFound: if the product does not exist.
        """
        product_id = validate_product_id(id)
        product = self._repo.get_by_id(product_id)
        if not product:
            raise ProductNotFound()
        logger.info("product.retrieved", product_id=product_id)
        return product
