"""JSON-file-backed implementation of ProductRepository.

The whole collection is loaded once and kept in memory. Every mutation
rewrites the file; the in-memory list is only swapped after the write
succeeded, so a failed write leaves both sides as they were.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import AbstractContextManager
from pathlib import Path

from stockapi.domain.exceptions import StorageError
from stockapi.domain.model.product import Product
from stockapi.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)
        self._seq_path = self._file_path.with_name(self._file_path.name + ".seq")
        self._lock = threading.RLock()
        self._products = self._load()
        self._last_id = max(self._load_sequence(), self._highest_id(self._products))

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        with self._lock:
            return list(self._products)

    def get_by_id(self, product_id: int | None) -> Product | None:
        if product_id is None:
            return None
        with self._lock:
            for product in self._products:
                if product.id == product_id:
                    return product
        return None

    def next_id(self) -> int:
        with self._lock:
            return self._last_id + 1

    def add(self, product: Product) -> None:
        with self._lock:
            products = self._products + [product]
            last_id = max(self._last_id, self._highest_id([product]))
            # Sequence first: a gap in ids is harmless, a reused id is not.
            if last_id != self._last_id:
                self._persist_sequence(last_id)
            self._persist(products)
            self._products = products
            self._last_id = last_id

    def replace(self, current: Product, updated: Product) -> None:
        with self._lock:
            index = self._index_of(current)
            products = list(self._products)
            products[index] = updated
            last_id = max(self._last_id, self._highest_id([updated]))
            if last_id != self._last_id:
                self._persist_sequence(last_id)
            self._persist(products)
            self._products = products
            self._last_id = last_id

    def remove(self, product: Product) -> None:
        with self._lock:
            index = self._index_of(product)
            products = self._products[:index] + self._products[index + 1:]
            self._persist(products)
            self._products = products

    def transaction(self) -> AbstractContextManager:
        return self._lock

    # --- Loading --------------------------------------------------------------

    def _load(self) -> list[Product]:
        if not self._file_path.exists():
            logger.info("No data file at %s, starting with an empty collection", self._file_path)
            return []

        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning(
                "Could not read %s (%s), starting with an empty collection",
                self._file_path, exc,
            )
            return []

        if not isinstance(raw, list):
            logger.warning(
                "Expected a JSON array in %s, got %s; starting with an empty collection",
                self._file_path, type(raw).__name__,
            )
            return []

        products = []
        for position, item in enumerate(raw):
            if not isinstance(item, dict):
                logger.warning("Skipping non-object entry at position %d in %s", position, self._file_path)
                continue
            products.append(Product.from_record(item))

        logger.info("Loaded %d products from %s", len(products), self._file_path)
        return products

    def _load_sequence(self) -> int:
        try:
            return int(self._seq_path.read_text(encoding="utf-8").strip())
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable id sequence %s (%s)", self._seq_path, exc)
            return 0

    @staticmethod
    def _highest_id(products: list[Product]) -> int:
        ids = [p.id for p in products if isinstance(p.id, int) and not isinstance(p.id, bool)]
        return max(ids, default=0)

    # --- File helpers ---------------------------------------------------------

    def _index_of(self, product: Product) -> int:
        for i, stored in enumerate(self._products):
            if stored is product:
                return i
        raise ValueError(f"Product {product.id!r} is not in the collection")

    def _persist(self, products: list[Product]) -> None:
        raw = [p.to_record() for p in products]
        self._write_atomic(self._file_path, json.dumps(raw, indent=2, ensure_ascii=False) + "\n")
        logger.debug("Wrote %d products to %s", len(products), self._file_path)

    def _persist_sequence(self, last_id: int) -> None:
        self._write_atomic(self._seq_path, f"{last_id}\n")

    @staticmethod
    def _write_atomic(path: Path, content: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(content)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            logger.error("Failed to write %s", path, exc_info=True)
            raise StorageError(f"Could not write {path}: {exc}") from exc
