# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import UTC, datetime

from storefront.domain import Cart
from storefront.infrastructure.seed_data import seed_carts

from .entity_store import EntityStore


class CartStore(EntityStore[Cart]):
    name = "carts"

    def __init__(
        self,
        seed: Iterable[Cart] | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        now = (clock or (lambda: datetime.now(UTC)))()
        super().__init__(seed_carts(now) if seed is None else seed)

    def get_by_user_id(self, user_id: str) -> list[Cart]:
        return self._select(lambda cart: cart.user_id == user_id, key=lambda cart: cart.date)

    def get_by_date_range(
        self, start: datetime | None = None, end: datetime | None = None
    ) -> list[Cart]:
        """Carts dated within ``[start, end]``; a missing bound is open."""

        def _within(cart: Cart) -> bool:
            if start is not None and cart.date < start:
                return False
            if end is not None and cart.date > end:
                return False
            return True

        return self._select(_within)


__all__ = ["CartStore"]
