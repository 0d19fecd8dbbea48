# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from flask import Blueprint, Response, jsonify

from storefront.infrastructure.auth import optional_user
from storefront.infrastructure.sessions import SessionManager
from storefront.infrastructure.stores import DataSubmissionStore
from storefront.interfaces.http.dto.data import DataSubmissionDTO
from storefront.interfaces.http.parsing import parse_body
from storefront.shared.logging import logger


class DataController:
    def __init__(self, *, store: DataSubmissionStore, sessions: SessionManager) -> None:
        self._store = store
        self._sessions = sessions

    def submit(self) -> tuple[Response, int]:
        dto = parse_body(DataSubmissionDTO, "Submission data is required")
        user_id = optional_user(self._sessions)

        total = self._store.add(dto.to_entity())
        logger.info(
            f"data.submit: ok (user={user_id or 'anonymous'}, "
            f"correlation_id={dto.correlation_id}, session_name={dto.session_name}, "
            f"numeric_value={dto.numeric_value}, total={total})"
        )
        return jsonify(
            {
                "isSuccessful": True,
                "message": "Data received successfully",
                "correlationId": dto.correlation_id,
                "timestamp": datetime.now(UTC).isoformat(),
                "totalSubmissions": total,
            }
        ), 200

    def list_all(self) -> tuple[Response, int]:
        user_id = optional_user(self._sessions)
        items = self._store.list_all()
        logger.info(f"data.list: ok (user={user_id or 'anonymous'}, n={len(items)})")
        return jsonify([DataSubmissionDTO.from_entity(item).to_json() for item in items]), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("data", __name__)
        bp.add_url_rule("/data", view_func=self.submit, methods=["POST"])
        bp.add_url_rule("/data", view_func=self.list_all, methods=["GET"])
        return bp
