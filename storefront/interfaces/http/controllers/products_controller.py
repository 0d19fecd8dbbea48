# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, g, jsonify

from storefront.infrastructure.auth import optional_user
from storefront.infrastructure.sessions import SessionManager
from storefront.infrastructure.stores import ProductStore
from storefront.interfaces.http.dto.catalog import ProductDTO
from storefront.interfaces.http.dto.query import ListQuery
from storefront.interfaces.http.parsing import parse_body, parse_query
from storefront.shared.errors import ProductNotFoundError
from storefront.shared.logging import logger

_MISSING_BODY = "Product data is required"


def _dump(products) -> Response:
    return jsonify([ProductDTO.from_entity(p).to_json() for p in products])


class ProductsController:
    def __init__(self, *, store: ProductStore, sessions: SessionManager) -> None:
        self._store = store
        self._sessions = sessions

    def list_products(self) -> tuple[Response, int]:
        t0 = perf_counter()
        query = parse_query(ListQuery)
        items = query.apply(self._store.get_all())
        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"products.list: ok (n={len(items)}, sort={query.sort}, "
            f"limit={query.limit}, dt_ms={dt:.0f})"
        )
        return _dump(items), 200

    def list_categories(self) -> tuple[Response, int]:
        categories = self._store.get_categories()
        logger.info(f"products.categories: ok (n={len(categories)})")
        return jsonify(categories), 200

    def list_by_category(self, category: str) -> tuple[Response, int]:
        query = parse_query(ListQuery)
        items = query.apply(self._store.get_by_category(category))
        logger.info(f"products.by_category: ok (category={category}, n={len(items)})")
        return _dump(items), 200

    def get_product(self, product_id: int) -> tuple[Response, int]:
        product = self._store.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return jsonify(ProductDTO.from_entity(product).to_json()), 200

    def create(self) -> tuple[Response, int]:
        dto = parse_body(ProductDTO, _MISSING_BODY)
        optional_user(self._sessions)
        created = self._store.add(dto.to_entity())
        logger.info(
            f"product.create: ok (id={created.id}, category={created.category}, "
            f"user_id={g.get('user_id')})"
        )
        return jsonify(ProductDTO.from_entity(created).to_json()), 200

    def update(self, product_id: int) -> tuple[Response, int]:
        dto = parse_body(ProductDTO, _MISSING_BODY)
        updated = self._store.update(product_id, dto.to_entity())
        if updated is None:
            raise ProductNotFoundError(product_id)
        return jsonify(ProductDTO.from_entity(updated).to_json()), 200

    def delete(self, product_id: int) -> tuple[Response, int]:
        deleted = self._store.delete(product_id)
        if deleted is None:
            raise ProductNotFoundError(product_id)
        return jsonify(ProductDTO.from_entity(deleted).to_json()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("products", __name__, url_prefix="/products")
        bp.add_url_rule("", view_func=self.list_products, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/categories", view_func=self.list_categories, methods=["GET"])
        bp.add_url_rule(
            "/category/<category>", view_func=self.list_by_category, methods=["GET"]
        )
        bp.add_url_rule("/<int:product_id>", view_func=self.get_product, methods=["GET"])
        bp.add_url_rule(
            "/<int:product_id>", view_func=self.update, methods=["PUT", "PATCH"]
        )
        bp.add_url_rule("/<int:product_id>", view_func=self.delete, methods=["DELETE"])
        return bp
