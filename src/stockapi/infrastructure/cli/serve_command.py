"""CLI command that runs the HTTP service."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

import click

from stockapi.infrastructure.bootstrap import product_repository
from stockapi.infrastructure.config import Settings
from stockapi.infrastructure.http.app import create_app

logger = logging.getLogger(__name__)


@click.command("serve")
@click.option("--host", help="Interface to bind.")
@click.option("--port", type=int, help="Port to listen on.")
@click.option("--data-file", type=click.Path(dir_okay=False, path_type=Path), help="Backing JSON file.")
@click.option("--debug/--no-debug", default=None, help="Run Flask in debug mode.")
@click.pass_obj
def serve(
    settings: Settings,
    host: str | None,
    port: int | None,
    data_file: Path | None,
    debug: bool | None,
) -> None:
    """Serve the product API over HTTP."""
    overrides = {
        "host": host,
        "port": port,
        "data_file": data_file,
        "debug": debug,
    }
    settings = replace(settings, **{k: v for k, v in overrides.items() if v is not None})

    app = create_app(product_repository(settings), settings)
    logger.info(
        "Stock API listening at http://%s:%d (data file: %s)",
        settings.host, settings.port, settings.data_file,
    )
    app.run(host=settings.host, port=settings.port, debug=settings.debug, use_reloader=False)
