"""OpenAPI 3.0 description of the HTTP surface, served at /api-docs."""

from __future__ import annotations

from flask import Blueprint, jsonify

docs_bp = Blueprint("docs", __name__)

_PRODUCT_REF = {"$ref": "#/components/schemas/Product"}

_ACK = {
    "description": "Acknowledgement",
    "content": {
        "application/json": {
            "schema": {
                "type": "object",
                "properties": {
                    "statusCode": {"type": "integer"},
                    "message": {"type": "string"},
                },
            }
        }
    },
}

_NOT_FOUND = {"description": "Product not found"}

_ID_PARAM = {
    "in": "path",
    "name": "id",
    "schema": {"type": "integer"},
    "required": True,
    "description": "The product id",
}

OPENAPI_DOCUMENT = {
    "openapi": "3.0.0",
    "info": {"title": "Stock API", "version": "1.0.0"},
    "components": {
        "schemas": {
            "Product": {
                "properties": {
                    "id": {"type": "integer"},
                    "createdAt": {"type": "string"},
                    "name": {"type": "string"},
                    "salePrice": {"type": "number"},
                    "reference": {"type": "string"},
                    "unitOfMeasure": {"type": "string"},
                    "manufacturer": {"type": "string"},
                    "stock": {"type": "integer"},
                    "productImage": {"type": "string"},
                }
            }
        }
    },
    "paths": {
        "/products": {
            "get": {
                "tags": ["Products"],
                "summary": "Retrieve a list of products",
                "responses": {
                    "200": {
                        "description": "A list of products",
                        "content": {
                            "application/json": {
                                "schema": {"type": "array", "items": _PRODUCT_REF}
                            }
                        },
                    }
                },
            },
            "post": {
                "tags": ["Products"],
                "summary": "Create a new product",
                "requestBody": {
                    "required": True,
                    "content": {"application/json": {"schema": _PRODUCT_REF}},
                },
                "responses": {"201": _ACK},
            },
        },
        "/products/{id}": {
            "get": {
                "tags": ["Products"],
                "summary": "Retrieve a single product",
                "parameters": [_ID_PARAM],
                "responses": {
                    "200": {
                        "description": "The product",
                        "content": {"application/json": {"schema": _PRODUCT_REF}},
                    },
                    "404": _NOT_FOUND,
                },
            },
            "patch": {
                "tags": ["Products"],
                "summary": "Update a product",
                "parameters": [_ID_PARAM],
                "requestBody": {
                    "required": True,
                    "content": {"application/json": {"schema": _PRODUCT_REF}},
                },
                "responses": {"200": _ACK, "404": _NOT_FOUND},
            },
            "delete": {
                "tags": ["Products"],
                "summary": "Delete a product",
                "parameters": [_ID_PARAM],
                "responses": {"200": _ACK, "404": _NOT_FOUND},
            },
        },
        "/products/pagination/{page}": {
            "get": {
                "tags": ["Products"],
                "summary": "Retrieve a paginated list of products with page in path",
                "parameters": [
                    {
                        "in": "path",
                        "name": "page",
                        "schema": {"type": "integer"},
                        "required": True,
                        "description": "The page number, starts from 1",
                    },
                    {
                        "in": "query",
                        "name": "limit",
                        "schema": {"type": "integer", "default": 10},
                        "required": False,
                        "description": "The number of products per page",
                    },
                ],
                "responses": {
                    "200": {
                        "description": "A paginated list of products",
                        "content": {
                            "application/json": {
                                "schema": {
                                    "type": "object",
                                    "properties": {
                                        "total": {"type": "integer"},
                                        "page": {"type": "integer"},
                                        "limit": {"type": "integer"},
                                        "products": {"type": "array", "items": _PRODUCT_REF},
                                    },
                                }
                            }
                        },
                    }
                },
            }
        },
    },
}


@docs_bp.route("/api-docs", methods=["GET"])
def api_docs():
    return jsonify(OPENAPI_DOCUMENT)
