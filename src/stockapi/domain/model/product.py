"""Product aggregate.

The only entity in the stock catalog. Fields are deliberately untyped:
whatever a client sends is stored as-is, so every descriptive attribute
is optional and keys outside the known set are carried in ``extras``.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import Any, Mapping


class _Unset:
    """Marker for a field the record never had."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()

# Wire/storage key -> attribute name, in serialization order.
FIELD_MAP: dict[str, str] = {
    "id": "id",
    "name": "name",
    "salePrice": "sale_price",
    "reference": "reference",
    "unitOfMeasure": "unit_of_measure",
    "manufacturer": "manufacturer",
    "stock": "stock",
    "productImage": "product_image",
    "createdAt": "created_at",
}

# Keys a client may set when creating a product.
DESCRIPTIVE_FIELDS: tuple[str, ...] = (
    "name",
    "salePrice",
    "reference",
    "unitOfMeasure",
    "manufacturer",
    "stock",
    "productImage",
)


@dataclass
class Product:
    """An inventory item with pricing, stock and descriptive metadata."""

    id: Any
    created_at: Any = UNSET
    name: Any = UNSET
    sale_price: Any = UNSET
    reference: Any = UNSET
    unit_of_measure: Any = UNSET
    manufacturer: Any = UNSET
    stock: Any = UNSET
    product_image: Any = UNSET
    extras: dict[str, Any] = field(default_factory=dict)

    def merged(self, changes: Mapping[str, Any]) -> Product:
        """Return a copy with ``changes`` shallow-merged on top.

        Only the keys present in ``changes`` are touched. ``id`` and
        ``createdAt`` are overwritten too when explicitly supplied.
        """
        updated = replace(self, extras=copy.copy(self.extras))
        for key, value in changes.items():
            attr = FIELD_MAP.get(key)
            if attr is not None:
                setattr(updated, attr, value)
            else:
                updated.extras[key] = value
        return updated

    def to_record(self) -> dict[str, Any]:
        """Serialize to the wire/storage shape.

        Fields that were never set are omitted; an explicit None is kept
        and written as null.
        """
        record: dict[str, Any] = {}
        for key, attr in FIELD_MAP.items():
            value = getattr(self, attr)
            if value is not UNSET:
                record[key] = value
        record.update(self.extras)
        return record

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> Product:
        known: dict[str, Any] = {}
        extras: dict[str, Any] = {}
        for key, value in raw.items():
            attr = FIELD_MAP.get(key)
            if attr is not None:
                known[attr] = value
            else:
                extras[key] = value
        known.setdefault("id", UNSET)
        return cls(**known, extras=extras)
