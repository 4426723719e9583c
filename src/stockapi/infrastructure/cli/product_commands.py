"""CLI commands for the Product collection."""

from __future__ import annotations

from typing import Any

import click

from stockapi.application.add_product import AddProductHandler
from stockapi.application.delete_product import DeleteProductHandler
from stockapi.application.list_products import ListProductsHandler
from stockapi.application.paginate_products import PaginateProductsHandler
from stockapi.application.show_product import ShowProductHandler
from stockapi.application.update_product import UpdateProductHandler
from stockapi.domain.exceptions import DomainException
from stockapi.domain.model.product import UNSET, Product
from stockapi.infrastructure.bootstrap import product_repository
from stockapi.infrastructure.config import Settings


def _field_options(func):
    options = [
        click.option("--name", help="Product name."),
        click.option("--sale-price", type=float, help="Sale price (e.g. 9.99)."),
        click.option("--reference", help="Reference code."),
        click.option("--unit", "unit_of_measure", help="Unit of measure."),
        click.option("--manufacturer", help="Manufacturer."),
        click.option("--stock", type=int, help="Units in stock."),
        click.option("--image", "product_image", help="Product image path or URL."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _fields(**values: Any) -> dict[str, Any]:
    """Map CLI option values to wire keys, dropping options not given."""
    keys = {
        "name": "name",
        "sale_price": "salePrice",
        "reference": "reference",
        "unit_of_measure": "unitOfMeasure",
        "manufacturer": "manufacturer",
        "stock": "stock",
        "product_image": "productImage",
    }
    return {keys[k]: v for k, v in values.items() if v is not None}


def _cell(value: Any) -> str:
    return "" if value is None or value is UNSET else str(value)


def _print_table(products: list[Product]) -> None:
    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>7}  Created")
    click.echo("-" * 72)
    for p in products:
        click.echo(
            f"{_cell(p.id):<6} {_cell(p.name):<20} {_cell(p.sale_price):>10} "
            f"{_cell(p.stock):>7}  {_cell(p.created_at)}"
        )


@click.command("list")
@click.option("--page", help="Page number, starting from 1.")
@click.option("--limit", help="Products per page (default from settings).")
@click.pass_obj
def product_list(settings: Settings, page: str | None, limit: str | None) -> None:
    """List products, optionally one page at a time."""
    repo = product_repository(settings)

    if page is None:
        products = ListProductsHandler(repo).handle()
    else:
        result = PaginateProductsHandler(repo, default_limit=settings.page_size).handle(page, limit)
        products = result.products
        click.echo(f"Page {result.page} (limit {result.limit}) of {result.total} products")

    if not products:
        click.echo("No products found.")
        return

    _print_table(products)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(settings: Settings, product_id: str) -> None:
    """Show a single product."""
    handler = ShowProductHandler(product_repository(settings))

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for key, value in product.to_record().items():
        click.echo(f"{key:<14} {value}")


@click.command("add")
@_field_options
@click.pass_obj
def product_add(settings: Settings, **values: Any) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repository(settings))

    try:
        ack = handler.handle(_fields(**values))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(ack.message)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@_field_options
@click.pass_obj
def product_update(settings: Settings, product_id: str, **values: Any) -> None:
    """Update the given fields of a product."""
    handler = UpdateProductHandler(product_repository(settings))

    try:
        ack = handler.handle(product_id, _fields(**values))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(ack.message)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(settings: Settings, product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repository(settings))

    try:
        ack = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(ack.message)
