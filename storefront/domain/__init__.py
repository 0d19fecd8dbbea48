# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Cart, CartProduct, DataSubmission, Product

__all__ = [
    "Cart",
    "CartProduct",
    "DataSubmission",
    "Product",
]
