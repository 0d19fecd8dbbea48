# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .cart_store import CartStore
from .data_store import DataSubmissionStore
from .entity_store import EntityStore, IdAllocator
from .product_store import ProductStore

__all__ = [
    "CartStore",
    "DataSubmissionStore",
    "EntityStore",
    "IdAllocator",
    "ProductStore",
]
