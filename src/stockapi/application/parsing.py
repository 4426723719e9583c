"""Lenient integer parsing for path and query parameters.

Clients have always been allowed to send ids and page numbers with
trailing junk (``"12abc"`` means 12). Anything without a leading integer
parses to None, which never matches a stored product.
"""

from __future__ import annotations

import re

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(raw: str | int | None) -> int | None:
    if raw is None:
        return None
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return None
    return int(match.group(1))
