# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, g, jsonify

from storefront.infrastructure.auth import optional_user
from storefront.infrastructure.sessions import SessionManager
from storefront.infrastructure.stores import CartStore
from storefront.interfaces.http.dto.catalog import CartDTO
from storefront.interfaces.http.dto.query import CartListQuery
from storefront.interfaces.http.parsing import parse_body, parse_query
from storefront.shared.errors import CartNotFoundError
from storefront.shared.logging import logger

_MISSING_BODY = "Cart data is required"


def _dump(carts) -> Response:
    return jsonify([CartDTO.from_entity(c).to_json() for c in carts])


class CartsController:
    def __init__(self, *, store: CartStore, sessions: SessionManager) -> None:
        self._store = store
        self._sessions = sessions

    def list_carts(self) -> tuple[Response, int]:
        t0 = perf_counter()
        query = parse_query(CartListQuery)
        if query.has_date_range:
            carts = self._store.get_by_date_range(query.startdate, query.enddate)
        else:
            carts = self._store.get_all()
        items = query.apply(carts)
        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"carts.list: ok (n={len(items)}, sort={query.sort}, limit={query.limit}, "
            f"startdate={query.startdate}, enddate={query.enddate}, dt_ms={dt:.0f})"
        )
        return _dump(items), 200

    def list_for_user(self, user_id: str) -> tuple[Response, int]:
        carts = self._store.get_by_user_id(user_id)
        logger.info(f"carts.by_user: ok (user_id={user_id}, n={len(carts)})")
        return _dump(carts), 200

    def get_cart(self, cart_id: int) -> tuple[Response, int]:
        cart = self._store.get_by_id(cart_id)
        if cart is None:
            raise CartNotFoundError(cart_id)
        return jsonify(CartDTO.from_entity(cart).to_json()), 200

    def create(self) -> tuple[Response, int]:
        dto = parse_body(CartDTO, _MISSING_BODY)
        optional_user(self._sessions)
        created = self._store.add(dto.to_entity())
        logger.info(
            f"cart.create: ok (id={created.id}, owner={created.user_id}, "
            f"products={len(created.products)}, user_id={g.get('user_id')})"
        )
        return jsonify(CartDTO.from_entity(created).to_json()), 200

    def update(self, cart_id: int) -> tuple[Response, int]:
        dto = parse_body(CartDTO, _MISSING_BODY)
        updated = self._store.update(cart_id, dto.to_entity())
        if updated is None:
            raise CartNotFoundError(cart_id)
        return jsonify(CartDTO.from_entity(updated).to_json()), 200

    def delete(self, cart_id: int) -> tuple[Response, int]:
        deleted = self._store.delete(cart_id)
        if deleted is None:
            raise CartNotFoundError(cart_id)
        return jsonify(CartDTO.from_entity(deleted).to_json()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("carts", __name__, url_prefix="/carts")
        bp.add_url_rule("", view_func=self.list_carts, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/user/<user_id>", view_func=self.list_for_user, methods=["GET"])
        bp.add_url_rule("/<int:cart_id>", view_func=self.get_cart, methods=["GET"])
        bp.add_url_rule("/<int:cart_id>", view_func=self.update, methods=["PUT", "PATCH"])
        bp.add_url_rule("/<int:cart_id>", view_func=self.delete, methods=["DELETE"])
        return bp
