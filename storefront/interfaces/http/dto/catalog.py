# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field, field_validator

from storefront.domain import Cart, CartProduct, Product

from .base import CamelModel, JsonDecimal, as_utc


class ProductDTO(CamelModel):
    # Ignored on input; the store assigns ids and routes carry them.
    id: int = 0
    title: str
    price: JsonDecimal
    description: str = ""
    image: str = ""
    category: str

    @classmethod
    def from_entity(cls, product: Product) -> ProductDTO:
        return cls(
            id=product.id,
            title=product.title,
            price=product.price,
            description=product.description,
            image=product.image,
            category=product.category,
        )

    def to_entity(self) -> Product:
        return Product(
            id=self.id,
            title=self.title,
            price=self.price,
            description=self.description,
            image=self.image,
            category=self.category,
        )


class CartProductDTO(CamelModel):
    product_id: int
    quantity: int = Field(default=1)


class CartDTO(CamelModel):
    id: int = 0
    user_id: str
    date: datetime = Field(default_factory=lambda: datetime.now(UTC))
    products: list[CartProductDTO] = Field(default_factory=list)

    @field_validator("date", mode="after")
    @classmethod
    def _normalize_date(cls, value: datetime) -> datetime:
        return as_utc(value)

    @classmethod
    def from_entity(cls, cart: Cart) -> CartDTO:
        return cls(
            id=cart.id,
            user_id=cart.user_id,
            date=cart.date,
            products=[
                CartProductDTO(product_id=item.product_id, quantity=item.quantity)
                for item in cart.products
            ],
        )

    def to_entity(self) -> Cart:
        return Cart(
            id=self.id,
            user_id=self.user_id,
            date=self.date,
            products=tuple(
                CartProduct(product_id=item.product_id, quantity=item.quantity)
                for item in self.products
            ),
        )
