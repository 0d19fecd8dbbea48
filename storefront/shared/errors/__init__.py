# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import (
    AppError,
    BadRequestError,
    CartNotFoundError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ProductNotFoundError,
    ProfileNotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "BadRequestError",
    "CartNotFoundError",
    "DomainError",
    "ForbiddenError",
    "NotFoundError",
    "ProductNotFoundError",
    "ProfileNotFoundError",
    "UnauthenticatedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
