"""Application service: Update Product use case."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from stockapi.application.dto import Acknowledgement
from stockapi.application.parsing import parse_int
from stockapi.application.show_product import NOT_FOUND_MESSAGE
from stockapi.domain.exceptions import EntityNotFoundError
from stockapi.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, changes: Mapping[str, Any]) -> Acknowledgement:
        """Shallow-merge ``changes`` onto a product.

        Keys absent from ``changes`` keep their values. ``id`` and
        ``createdAt`` are overwritten only if the caller sends them.
        """
        with self._product_repo.transaction():
            product = self._product_repo.get_by_id(parse_int(product_id))
            if product is None:
                raise EntityNotFoundError(NOT_FOUND_MESSAGE)

            updated = product.merged(changes)
            self._product_repo.replace(product, updated)

        logger.info("Updated product %s (%s)", updated.id, ", ".join(changes) or "no fields")
        return Acknowledgement(201, f"Product {updated.id} updated successfully!")
