# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""JSON rendering for every error leaving the API."""

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from storefront.shared.config import AppConfig, load_config
from storefront.shared.logging import logger

from .base import AppError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def _http_error_code(exc: HTTPException) -> str:
    # "Method Not Allowed" -> "method_not_allowed"
    return (exc.name or "http_error").lower().replace(" ", "_")


def register_error_handler(
    app: Flask,
    *,
    config: AppConfig | None = None,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    config = config or load_config()
    include_traceback = config.debug_logging

    @app.errorhandler(AppError)
    def _on_app_error(exc: AppError):
        log = logger.warning if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR else logger.info
        log(f"{request.method} {request.path} -> {int(exc.status)} {exc.code}")
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _on_http_error(exc: HTTPException):
        if exc.code is not None and exc.code < 400:
            return exc
        logger.info(f"{request.method} {request.path} -> {exc.code} {exc.name}")
        payload = {"error": _http_error_code(exc), "message": exc.description}
        return jsonify(payload), exc.code or HTTPStatus.BAD_REQUEST

    @app.errorhandler(Exception)
    def _on_unexpected(exc: Exception):
        user_id = g.get("user_id")
        if include_traceback:
            logger.exception(
                f"unhandled {type(exc).__name__} on {request.method} {request.path} "
                f"user={user_id} bytes={request.content_length or 0}"
            )
        else:
            logger.error(f"unhandled {type(exc).__name__} on {request.method} {request.path}")
        return jsonify({"error": "internal_error"}), default_status


__all__ = ["handle_app_error", "register_error_handler"]
