# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable

from storefront.domain import Product
from storefront.infrastructure.seed_data import seed_products

from .entity_store import EntityStore


class ProductStore(EntityStore[Product]):
    name = "products"

    def __init__(self, seed: Iterable[Product] | None = None) -> None:
        super().__init__(seed_products() if seed is None else seed)

    def get_categories(self) -> list[str]:
        return sorted({product.category for product in self.get_all()})

    def get_by_category(self, category: str) -> list[Product]:
        wanted = category.casefold()
        return self._select(lambda product: product.category.casefold() == wanted)


__all__ = ["ProductStore"]
