"""Flask application factory.

The repository is built once by the caller and shared by every request
through ``app.extensions``; handlers are cheap and created per request.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify

from stockapi.domain.exceptions import EntityNotFoundError, StorageError
from stockapi.domain.repository.product_repository import ProductRepository
from stockapi.infrastructure.config import Settings
from stockapi.infrastructure.http.openapi import docs_bp
from stockapi.infrastructure.http.products import products_bp

logger = logging.getLogger(__name__)


def create_app(product_repo: ProductRepository, settings: Settings | None = None) -> Flask:
    settings = settings or Settings()

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions["product_repository"] = product_repo
    app.config["PAGE_SIZE"] = settings.page_size

    app.register_blueprint(products_bp)
    app.register_blueprint(docs_bp)

    @app.errorhandler(EntityNotFoundError)
    def handle_not_found(exc: EntityNotFoundError):
        return jsonify({"message": str(exc)}), 404

    @app.errorhandler(StorageError)
    def handle_storage_error(exc: StorageError):
        logger.error("Storage failure: %s", exc)
        return jsonify({"message": str(exc)}), 500

    return app
