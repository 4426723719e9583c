"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from stockapi.application.dto import Acknowledgement
from stockapi.domain.model.product import DESCRIPTIVE_FIELDS, Product
from stockapi.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2024-05-01T10:00:00.000Z."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, fields: Mapping[str, Any]) -> Acknowledgement:
        """Add a new product to the catalog.

        Only the descriptive fields are taken from ``fields``; the id and
        creation timestamp are always assigned here.
        """
        changes = {key: fields[key] for key in DESCRIPTIVE_FIELDS if key in fields}

        with self._product_repo.transaction():
            product = Product(
                id=self._product_repo.next_id(),
                created_at=format_timestamp(self._clock()),
            ).merged(changes)
            self._product_repo.add(product)

        logger.info("Created product %s", product.id)
        return Acknowledgement(201, f"Product {product.id} created successfully!")
