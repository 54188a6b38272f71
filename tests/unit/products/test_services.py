"""Unit tests for ProductService.

Covers:
- create_product: happy path, duplicate name (check and constraint).
- update_product: happy path, not found, invalid id, constraint clash.
- get_product: happy path, not found, invalid id.
- list_products: window and count delegation.
- delete_product: happy path, not found, invalid id.
"""

from __future__ import annotations

import uuid
from unittest.mock import MagicMock

import pytest
from django.db import IntegrityError

from modules.products.dtos import ProductInputDTO
from modules.products.exceptions import (
    InvalidProductId,
    ProductAlreadyExists,
    ProductNotFound,
)
from modules.products.models import Product
from modules.products.pagination import PageRequest
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _dto(**overrides) -> ProductInputDTO:
    data = {"name": "Widget", "price": 19.99, "category": "Gadgets", "inStock": True}
    data.update(overrides)
    return ProductInputDTO.model_validate(data)


def _product(**overrides) -> Product:
    fields = {"name": "Widget", "price": 19.99, "category": "Gadgets", "in_stock": True}
    fields.update(overrides)
    return Product(**fields)


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_name.return_value = None
        mock_repo.create.side_effect = lambda fields: Product(**fields)

        product = service.create_product(_dto())

        assert product.name == "Widget"
        assert product.price == 19.99
        assert product.in_stock is True
        mock_repo.get_by_name.assert_called_once_with("Widget")
        mock_repo.create.assert_called_once_with(
            {"name": "Widget", "price": 19.99, "category": "Gadgets", "in_stock": True}
        )

    def test_duplicate_name_raises(self, service, mock_repo):
        mock_repo.get_by_name.return_value = _product()

        with pytest.raises(ProductAlreadyExists, match="Product name already exists"):
            service.create_product(_dto())

        mock_repo.create.assert_not_called()

    def test_constraint_violation_maps_to_duplicate(self, service, mock_repo):
        mock_repo.get_by_name.return_value = None
        mock_repo.create.side_effect = IntegrityError("UNIQUE constraint failed")

        with pytest.raises(ProductAlreadyExists):
            service.create_product(_dto())


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_success(self, service, mock_repo):
        product_id = str(uuid.uuid4())
        mock_repo.replace.return_value = _product(name="Renamed")

        product = service.update_product(product_id, _dto(name="Renamed"))

        assert product.name == "Renamed"
        mock_repo.replace.assert_called_once()
        assert mock_repo.replace.call_args.args[0] == product_id

    def test_does_not_look_up_name(self, service, mock_repo):
        mock_repo.replace.return_value = _product()
        service.update_product(str(uuid.uuid4()), _dto())
        mock_repo.get_by_name.assert_not_called()

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.replace.return_value = None

        with pytest.raises(ProductNotFound):
            service.update_product(str(uuid.uuid4()), _dto())

    def test_invalid_id_skips_store(self, service, mock_repo):
        with pytest.raises(InvalidProductId):
            service.update_product("not-a-uuid", _dto())
        mock_repo.replace.assert_not_called()

    def test_name_clash_maps_to_duplicate(self, service, mock_repo):
        mock_repo.replace.side_effect = IntegrityError("UNIQUE constraint failed")

        with pytest.raises(ProductAlreadyExists):
            service.update_product(str(uuid.uuid4()), _dto())


# ===========================================================================
# get_product
# ===========================================================================


class TestGetProduct:
    def test_success(self, service, mock_repo):
        existing = _product()
        mock_repo.get_by_id.return_value = existing

        assert service.get_product(str(existing.id)) is existing

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound, match="Product not found"):
            service.get_product(str(uuid.uuid4()))

    def test_invalid_id_skips_store(self, service, mock_repo):
        with pytest.raises(InvalidProductId):
            service.get_product("invalid-id")
        mock_repo.get_by_id.assert_not_called()


# ===========================================================================
# list_products
# ===========================================================================


class TestListProducts:
    def test_uses_window_and_count(self, service, mock_repo):
        items = [_product(name="A"), _product(name="B")]
        mock_repo.list_page.return_value = items
        mock_repo.count.return_value = 12

        page = service.list_products(PageRequest(page=3, limit=5))

        mock_repo.list_page.assert_called_once_with(10, 5, None)
        mock_repo.count.assert_called_once_with(None)
        assert page.items == items
        assert page.total == 12
        assert page.total_pages == 3

    def test_passes_filters(self, service, mock_repo):
        mock_repo.list_page.return_value = []
        mock_repo.count.return_value = 3

        service.list_products(PageRequest(page=1, limit=10), {"category": "Books"})

        mock_repo.list_page.assert_called_once_with(0, 10, {"category": "Books"})
        mock_repo.count.assert_called_once_with({"category": "Books"})

    def test_page_past_end_skips_window_query(self, service, mock_repo):
        mock_repo.count.return_value = 3

        page = service.list_products(PageRequest(page=10**20, limit=10))

        mock_repo.list_page.assert_not_called()
        assert page.items == []
        assert page.total == 3
        assert page.total_pages == 1

    def test_empty_store_skips_window_query(self, service, mock_repo):
        mock_repo.count.return_value = 0

        page = service.list_products(PageRequest(page=1, limit=10))

        mock_repo.list_page.assert_not_called()
        assert page.items == []
        assert page.total_pages == 0


# ===========================================================================
# delete_product
# ===========================================================================


class TestDeleteProduct:
    def test_success(self, service, mock_repo):
        product_id = str(uuid.uuid4())
        mock_repo.delete.return_value = True

        service.delete_product(product_id)

        mock_repo.delete.assert_called_once_with(product_id)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.delete.return_value = False

        with pytest.raises(ProductNotFound):
            service.delete_product(str(uuid.uuid4()))

    def test_invalid_id_skips_store(self, service, mock_repo):
        with pytest.raises(InvalidProductId):
            service.delete_product("123")
        mock_repo.delete.assert_not_called()
