"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from stockapi.application.dto import Acknowledgement
from stockapi.application.parsing import parse_int
from stockapi.application.show_product import NOT_FOUND_MESSAGE
from stockapi.domain.exceptions import EntityNotFoundError
from stockapi.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Acknowledgement:
        """Remove the first product with this id.

        The acknowledgement echoes ``product_id`` exactly as it was given.
        """
        with self._product_repo.transaction():
            product = self._product_repo.get_by_id(parse_int(product_id))
            if product is None:
                raise EntityNotFoundError(NOT_FOUND_MESSAGE)
            self._product_repo.remove(product)

        logger.info("Deleted product %s", product.id)
        return Acknowledgement(201, f"Product {product_id} deleted successfully!")
