"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into HTTP status codes and
``{"message": ...}`` bodies.  Only store faults (``DatabaseError``) are
turned into 500 responses here; anything else propagates.

Response envelopes differ per action and are part of the public
contract: retrieve/create wrap the record as ``{"product": ...}`` while
update returns the bare record.
"""

from __future__ import annotations

import structlog
from django.db import DatabaseError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.exceptions import (
    InvalidProductId,
    ProductAlreadyExists,
    ProductNotFound,
    ProductValidationError,
)
from modules.products.models import Product
from modules.products.pagination import PageRequest
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService
from modules.products.validators import validate_product_id, validate_product_payload

logger = structlog.get_logger(__name__)

GENERIC_ERROR_MESSAGE = "Oops! Something went wrong"


def _message(message: str, status_code: int) -> Response:
    return Response({"message": message}, status=status_code)


def _store_fault(exc: DatabaseError, action: str, *, wrap: bool) -> Response:
    logger.error("product.store_fault", action=action, error=str(exc))
    if wrap:
        return Response(
            {"message": GENERIC_ERROR_MESSAGE, "error": str(exc)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return _message(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    # Let malformed ids reach the view so they answer 400, not 404.
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products?page=&limit="""
        page_request = PageRequest.from_query(request.query_params)
        try:
            page = self._service.list_products(page_request, request.query_params)
        except DatabaseError as exc:
            return _store_fault(exc, "list", wrap=True)

        return Response(
            {
                "products": ProductSerializer(page.items, many=True).data,
                "currentPage": page_request.page,
                "totalPages": page.total_pages,
                "totalProducts": page.total,
            }
        )

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        try:
            product = self._service.get_product(pk)
        except InvalidProductId as exc:
            return _message(str(exc), status.HTTP_400_BAD_REQUEST)
        except ProductNotFound as exc:
            return _message(str(exc), status.HTTP_404_NOT_FOUND)
        except DatabaseError as exc:
            return _store_fault(exc, "retrieve", wrap=True)

        return Response({"product": ProductSerializer(product).data})

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        try:
            dto = validate_product_payload(request.data)
        except ProductValidationError as exc:
            return _message(str(exc), status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.create_product(dto)
        except ProductAlreadyExists as exc:
            return _message(str(exc), status.HTTP_400_BAD_REQUEST)
        except DatabaseError as exc:
            return _store_fault(exc, "create", wrap=True)

        out = ProductSerializer(product)
        return Response({"product": out.data}, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        try:
            product_id = validate_product_id(pk)
        except InvalidProductId as exc:
            return _message(str(exc), status.HTTP_400_BAD_REQUEST)

        try:
            dto = validate_product_payload(request.data)
        except ProductValidationError as exc:
            return _message(str(exc), status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.update_product(product_id, dto)
        except ProductNotFound as exc:
            return _message(str(exc), status.HTTP_404_NOT_FOUND)
        except ProductAlreadyExists as exc:
            return _message(str(exc), status.HTTP_400_BAD_REQUEST)
        except DatabaseError as exc:
            return _store_fault(exc, "update", wrap=False)

        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        try:
            self._service.delete_product(pk)
        except InvalidProductId as exc:
            return _message(str(exc), status.HTTP_400_BAD_REQUEST)
        except ProductNotFound as exc:
            return _message(str(exc), status.HTTP_404_NOT_FOUND)
        except DatabaseError as exc:
            return _store_fault(exc, "destroy", wrap=False)

        return _message("Product deleted successfully", status.HTTP_200_OK)
