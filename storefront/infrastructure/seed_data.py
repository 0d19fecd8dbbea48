# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Fixed rows loaded into the in-memory stores at construction time."""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal

from storefront.domain import Cart, CartProduct, Product
from storefront.domain.users import UserProfile

_PRODUCT_ROWS: tuple[tuple[str, str, str, str, str], ...] = (
    ("Laptop", "799.99", "High-performance laptop with 16GB RAM", "laptop", "electronics"),
    ("Smartphone", "699.99", "Latest model smartphone with 128GB storage", "phone", "electronics"),
    ("Wireless Headphones", "149.99", "Noise-cancelling wireless headphones", "headphones", "electronics"),
    ("Tablet", "449.99", "10-inch tablet with stylus support", "tablet", "electronics"),
    ("Smart Watch", "299.99", "Fitness tracking smart watch", "watch", "electronics"),
    ("T-Shirt", "19.99", "Cotton t-shirt in various colors", "tshirt", "clothing"),
    ("Jeans", "49.99", "Classic fit denim jeans", "jeans", "clothing"),
    ("Jacket", "89.99", "All-weather jacket with hood", "jacket", "clothing"),
    ("Sneakers", "79.99", "Comfortable running sneakers", "sneakers", "clothing"),
    ("Hat", "24.99", "Adjustable baseball cap", "hat", "clothing"),
    ("Coffee Maker", "89.99", "Programmable coffee maker with timer", "coffee", "home"),
    ("Blender", "59.99", "High-speed blender for smoothies", "blender", "home"),
    ("Vacuum Cleaner", "199.99", "Cordless vacuum with HEPA filter", "vacuum", "home"),
    ("Garden Tools Set", "49.99", "Complete set of gardening tools", "tools", "home"),
    ("Throw Pillow", "29.99", "Decorative throw pillow", "pillow", "home"),
    ("Yoga Mat", "34.99", "Non-slip yoga mat with carrying strap", "yoga", "sports"),
    ("Dumbbell Set", "99.99", "Adjustable dumbbell set 5-50 lbs", "dumbbells", "sports"),
    ("Camping Tent", "149.99", "4-person waterproof camping tent", "tent", "sports"),
    ("Bicycle", "399.99", "Mountain bike with 21 speeds", "bike", "sports"),
    ("Soccer Ball", "24.99", "Official size soccer ball", "soccer", "sports"),
)

# (user id, age in days, ((product id, quantity), ...))
_CART_ROWS: tuple[tuple[str, int, tuple[tuple[int, int], ...]], ...] = (
    ("user-001", 5, ((1, 1), (3, 1))),
    ("user-001", 3, ((6, 2), (7, 1))),
    ("user-002", 7, ((11, 1), (12, 1))),
    ("user-002", 2, ((16, 1), (17, 1))),
    ("user-003", 10, ((2, 1), (5, 1))),
    ("user-003", 1, ((19, 1), (20, 2))),
    ("user-001", 15, ((4, 1), (15, 2))),
    ("user-002", 20, ((8, 1), (9, 1))),
    ("user-003", 12, ((13, 1), (14, 1))),
    ("user-001", 0, ((10, 1), (18, 1))),
)

# (user id, username, full name, account age in days)
_USER_ROWS: tuple[tuple[str, str, str, int], ...] = (
    ("user-001", "demo", "Demo User", 30),
    ("user-002", "admin", "Admin User", 60),
    ("user-003", "test", "Test User", 15),
)


def seed_products() -> list[Product]:
    return [
        Product(
            id=index,
            title=title,
            price=Decimal(price),
            description=description,
            image=f"https://example.com/{image}.jpg",
            category=category,
        )
        for index, (title, price, description, image, category) in enumerate(
            _PRODUCT_ROWS, start=1
        )
    ]


def seed_carts(now: datetime) -> list[Cart]:
    return [
        Cart(
            id=index,
            user_id=user_id,
            date=now - timedelta(days=age_days),
            products=tuple(CartProduct(product_id=pid, quantity=qty) for pid, qty in items),
        )
        for index, (user_id, age_days, items) in enumerate(_CART_ROWS, start=1)
    ]


def seed_users(now: datetime) -> list[UserProfile]:
    return [
        UserProfile(
            user_id=user_id,
            username=username,
            email=f"{username}@example.com",
            full_name=full_name,
            created_at=now - timedelta(days=age_days),
        )
        for user_id, username, full_name, age_days in _USER_ROWS
    ]


__all__ = ["seed_carts", "seed_products", "seed_users"]
