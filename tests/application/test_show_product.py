"""Tests for the ShowProduct and ListProducts use cases."""

import pytest

from stockapi.application.list_products import ListProductsHandler
from stockapi.application.show_product import ShowProductHandler
from stockapi.domain.exceptions import EntityNotFoundError
from stockapi.domain.model.product import Product
from tests.fakes import FakeProductRepository, make_products


class TestShowProduct:

    def test_returns_requested_product(self):
        repo = FakeProductRepository(make_products(3))

        for product_id in ("1", "2", "3"):
            assert ShowProductHandler(repo).handle(product_id).id == int(product_id)

    def test_missing_id_not_found(self):
        repo = FakeProductRepository(make_products(3))

        with pytest.raises(EntityNotFoundError, match="Product not found"):
            ShowProductHandler(repo).handle("42")

    def test_non_numeric_id_not_found(self):
        repo = FakeProductRepository(make_products(3))

        with pytest.raises(EntityNotFoundError):
            ShowProductHandler(repo).handle("abc")

    def test_trailing_junk_ignored(self):
        repo = FakeProductRepository(make_products(3))

        assert ShowProductHandler(repo).handle("2abc").id == 2

    def test_first_positional_match_wins(self):
        repo = FakeProductRepository([Product(id=1, name="first"), Product(id=1, name="second")])

        assert ShowProductHandler(repo).handle("1").name == "first"


class TestListProducts:

    def test_returns_insertion_order(self):
        repo = FakeProductRepository([Product(id=3), Product(id=1), Product(id=2)])

        assert [p.id for p in ListProductsHandler(repo).handle()] == [3, 1, 2]

    def test_empty_collection(self):
        assert ListProductsHandler(FakeProductRepository()).handle() == []
