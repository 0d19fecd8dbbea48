# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from flask import Blueprint, Response, jsonify, request
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from storefront.infrastructure.auth import optional_user
from storefront.infrastructure.observability import ACTIVE_SESSIONS
from storefront.infrastructure.sessions import SessionManager
from storefront.shared.config import AppConfig
from storefront.shared.logging import logger


class MiscController:
    def __init__(self, *, sessions: SessionManager, config: AppConfig) -> None:
        self._sessions = sessions
        self._config = config

    def health(self) -> tuple[Response, int]:
        user_id = optional_user(self._sessions)
        logger.info(f"health: ok (user={user_id or 'anonymous'})")
        return jsonify(
            {
                "status": "healthy",
                "timestamp": datetime.now(UTC).isoformat(),
                "authenticated": user_id is not None,
            }
        ), 200

    def config(self) -> tuple[Response, int]:
        correlation_id = request.headers.get("X-Correlation-ID")
        user_id = optional_user(self._sessions)
        logger.info(
            f"config: requested (user={user_id or 'anonymous'}, "
            f"correlation_id={correlation_id or '-'})"
        )
        return jsonify(
            {
                "webViewUrl": self._config.client.webview_url,
                "featureFlags": self._config.client.feature_flags(),
            }
        ), 200

    def metrics(self) -> Response:
        ACTIVE_SESSIONS.set(self._sessions.active_session_count())
        return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule("/config", view_func=self.config, methods=["GET"])
        if self._config.observability.metrics_enabled:
            bp.add_url_rule("/metrics", view_func=self.metrics, methods=["GET"])
        return bp
