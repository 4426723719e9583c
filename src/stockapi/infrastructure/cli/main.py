import logging
from dataclasses import replace
from pathlib import Path

import click

from stockapi.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from stockapi.infrastructure.cli.serve_command import serve
from stockapi.infrastructure.config import load_settings


@click.group()
@click.option("--data-file", type=click.Path(dir_okay=False, path_type=Path), help="Backing JSON file.")
@click.option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...).")
@click.pass_context
def cli(ctx: click.Context, data_file: Path | None, log_level: str | None) -> None:
    """Stock API: product catalog service"""
    settings = load_settings()
    if data_file is not None:
        settings = replace(settings, data_file=data_file)
    if log_level:
        settings = replace(settings, log_level=log_level.upper())

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
cli.add_command(serve)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
