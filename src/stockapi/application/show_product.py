"""Application service: Show Product use case (query)."""

from __future__ import annotations

from stockapi.application.parsing import parse_int
from stockapi.domain.exceptions import EntityNotFoundError
from stockapi.domain.model.product import Product
from stockapi.domain.repository.product_repository import ProductRepository

NOT_FOUND_MESSAGE = "Product not found"


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(parse_int(product_id))
        if product is None:
            raise EntityNotFoundError(NOT_FOUND_MESSAGE)
        return product
