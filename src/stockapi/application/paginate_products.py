"""Application service: Paginate Products use case (query)."""

from __future__ import annotations

from stockapi.application.dto import ProductPage
from stockapi.application.parsing import parse_int
from stockapi.domain.repository.product_repository import ProductRepository

DEFAULT_PAGE_SIZE = 10


class PaginateProductsHandler:

    def __init__(self, product_repo: ProductRepository, default_limit: int = DEFAULT_PAGE_SIZE) -> None:
        self._product_repo = product_repo
        self._default_limit = default_limit

    def handle(self, page: str, limit: str | None = None) -> ProductPage:
        """Return the slice ``[(page - 1) * limit, page * limit)``.

        A missing, unparsable or zero limit falls back to the default.
        Out-of-range pages, including page 0 and negative pages, give an
        empty slice rather than an error.
        """
        page_number = parse_int(page)
        page_size = parse_int(limit) or self._default_limit

        products = self._product_repo.list_all()

        if page_number is None or page_size < 0:
            window = []
        else:
            offset = (page_number - 1) * page_size
            window = products[offset:offset + page_size] if offset >= 0 else []

        return ProductPage(
            total=len(products),
            page=page_number,
            limit=page_size,
            products=window,
        )
