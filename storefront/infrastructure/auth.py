# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import g, request

from storefront.infrastructure.sessions import SessionManager
from storefront.shared.errors import UnauthenticatedError
from storefront.shared.logging import logger, set_user_id


def bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        return auth[7:].strip()
    return ""


def require_user(sessions: SessionManager) -> str:
    """Return the user id behind the request's bearer token or raise 401."""

    token = bearer_token()
    if not token:
        logger.warning(f"No Authorization header on {request.method} {request.path}")
        raise UnauthenticatedError()

    validation = sessions.validate_session(token)
    if not validation.valid or validation.user_id is None:
        logger.warning(f"Auth failed (token not found/expired) on {request.method} {request.path}")
        raise UnauthenticatedError()

    g.user_id = validation.user_id
    set_user_id(validation.user_id)
    return validation.user_id


def optional_user(sessions: SessionManager) -> str | None:
    """Tag the request with the caller's user id when a valid token is present."""

    token = bearer_token()
    if not token:
        return None
    validation = sessions.validate_session(token)
    if validation.valid:
        g.user_id = validation.user_id
        set_user_id(validation.user_id)
        return validation.user_id
    return None


__all__ = ["bearer_token", "optional_user", "require_user"]
