# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Catalog and cart entities served by the storefront API."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(slots=True, frozen=True)
class Product:
    """Catalog item. ``id`` is assigned by the product store."""

    id: int
    title: str
    price: Decimal
    description: str
    image: str
    category: str


@dataclass(slots=True, frozen=True)
class CartProduct:

    product_id: int
    quantity: int


@dataclass(slots=True, frozen=True)
class Cart:
    """A user's basket at a point in time. ``date`` is always UTC-aware."""

    id: int
    user_id: str
    date: datetime
    products: tuple[CartProduct, ...] = field(default_factory=tuple)


@dataclass(slots=True, frozen=True)
class DataSubmission:

    correlation_id: str
    session_name: str
    notes: str
    numeric_value: Decimal
