# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-request correlation ids, access logging and request metrics."""

from __future__ import annotations

import secrets
import time

from flask import Flask, Response, g, request

from storefront.infrastructure.observability import observe_request
from storefront.shared.config import AppConfig, load_config
from storefront.shared.logging import (clear_correlation_id, logger,
                                       sanitize_mapping, set_correlation_id)

REQUEST_ID_HEADER = "X-Request-ID"


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    return forwarded.split(",")[0].strip() or request.remote_addr or "unknown"


def _route_label() -> str:
    # Templated rule keeps metric cardinality bounded (/products/<int:product_id>).
    return request.url_rule.rule if request.url_rule else "unmatched"


def configure_request_logging(app: Flask, config: AppConfig | None = None) -> None:
    config = config or load_config()
    verbose = config.debug_logging
    metrics_enabled = config.observability.metrics_enabled

    @app.before_request
    def _open_request() -> None:
        correlation_id = request.headers.get(REQUEST_ID_HEADER) or secrets.token_urlsafe(8)
        set_correlation_id(correlation_id)
        g.correlation_id = correlation_id
        g.started_at = time.perf_counter()

        if verbose:
            logger.debug(
                f"--> {request.method} {request.path} from {_client_ip()} "
                f"args={sanitize_mapping(request.args.to_dict())} "
                f"headers={sanitize_mapping(dict(request.headers), headers=True)} "
                f"bytes={request.content_length or 0}"
            )
        else:
            logger.info(f"--> {request.method} {request.path} from {_client_ip()}")

    @app.after_request
    def _close_request(response: Response) -> Response:
        elapsed = time.perf_counter() - g.get("started_at", time.perf_counter())
        logger.info(
            f"<-- {request.method} {request.path} {response.status_code} "
            f"in {elapsed * 1000:.1f}ms user={g.get('user_id') or 'anonymous'}"
        )

        if metrics_enabled:
            observe_request(_route_label(), request.method, response.status_code, elapsed)

        response.headers.setdefault(REQUEST_ID_HEADER, g.get("correlation_id", "-"))
        return response

    @app.teardown_request
    def _reset_context(exc: BaseException | None) -> None:
        if exc is not None:
            logger.opt(exception=exc if verbose else None).error(
                f"request failed: {type(exc).__name__} on {request.method} {request.path}"
            )
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
