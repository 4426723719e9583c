"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry results from the application layer to the HTTP and CLI
layers; ``to_dict`` gives the JSON shape clients see.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from stockapi.domain.model.product import Product


@dataclass(frozen=True)
class Acknowledgement:
    """Output: confirmation of a create, update or delete."""

    status_code: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"statusCode": self.status_code, "message": self.message}


@dataclass(frozen=True)
class ProductPage:
    """Output: one offset/limit slice of the collection."""

    total: int
    page: int | None
    limit: int
    products: list[Product]

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "products": [p.to_record() for p in self.products],
        }
