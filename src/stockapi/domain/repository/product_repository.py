"""Abstract repository for the Product collection (the Record Store).

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory)
live in the infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager, nullcontext

from stockapi.domain.model.product import Product


class ProductRepository(ABC):
    """An ordered collection of products.

    Order is insertion order. Lookups return the first positional match,
    which only matters if duplicate ids were written by hand.
    """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def get_by_id(self, product_id: int | None) -> Product | None:
        """Return the first product with this ID, or None if not found."""

    @abstractmethod
    def next_id(self) -> int:
        """Return the ID the next added product should get."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Append a new product and persist the collection."""

    @abstractmethod
    def replace(self, current: Product, updated: Product) -> None:
        """Swap the stored ``current`` record for ``updated`` and persist."""

    @abstractmethod
    def remove(self, product: Product) -> None:
        """Remove the stored ``product`` record and persist."""

    def transaction(self) -> AbstractContextManager:
        """Hold exclusive access for a read-modify-write cycle."""
        return nullcontext()
