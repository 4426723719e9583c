"""HTTP routes for the Product collection."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, jsonify, request

from stockapi.application.add_product import AddProductHandler
from stockapi.application.delete_product import DeleteProductHandler
from stockapi.application.list_products import ListProductsHandler
from stockapi.application.paginate_products import PaginateProductsHandler
from stockapi.application.show_product import ShowProductHandler
from stockapi.application.update_product import UpdateProductHandler
from stockapi.domain.repository.product_repository import ProductRepository

products_bp = Blueprint("products", __name__)


def _repository() -> ProductRepository:
    return current_app.extensions["product_repository"]


def _json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@products_bp.route("/products", methods=["GET"])
def list_products():
    products = ListProductsHandler(_repository()).handle()
    return jsonify([p.to_record() for p in products])


@products_bp.route("/products/<product_id>", methods=["GET"])
def show_product(product_id: str):
    product = ShowProductHandler(_repository()).handle(product_id)
    return jsonify(product.to_record())


@products_bp.route("/products", methods=["POST"])
def create_product():
    ack = AddProductHandler(_repository()).handle(_json_body())
    return jsonify(ack.to_dict()), 201


@products_bp.route("/products/<product_id>", methods=["PATCH"])
def update_product(product_id: str):
    ack = UpdateProductHandler(_repository()).handle(product_id, _json_body())
    return jsonify(ack.to_dict())


@products_bp.route("/products/<product_id>", methods=["DELETE"])
def delete_product(product_id: str):
    ack = DeleteProductHandler(_repository()).handle(product_id)
    return jsonify(ack.to_dict())


@products_bp.route("/products/pagination/<page>", methods=["GET"])
def paginate_products(page: str):
    handler = PaginateProductsHandler(_repository(), default_limit=current_app.config["PAGE_SIZE"])
    result = handler.handle(page, request.args.get("limit"))
    return jsonify(result.to_dict())
