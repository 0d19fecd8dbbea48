# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from pydantic import ValidationError

from storefront.domain.users import InvalidCredentialsError
from storefront.infrastructure.auth import bearer_token
from storefront.infrastructure.observability import LOGIN_COUNTER
from storefront.infrastructure.sessions import SessionManager
from storefront.interfaces.http.dto.auth import (LoginRequestDTO,
                                                 LoginResponseDTO, MessageDTO)
from storefront.interfaces.http.parsing import json_body
from storefront.shared.errors import BadRequestError
from storefront.shared.logging import logger


class AuthController:
    def __init__(self, *, sessions: SessionManager) -> None:
        self._sessions = sessions

    def login(self) -> tuple[Response, int]:
        payload = json_body("Username and password are required")
        try:
            dto = LoginRequestDTO.model_validate(payload)
        except ValidationError as exc:
            raise BadRequestError("Username and password are required") from exc

        result = self._sessions.authenticate(dto.username, dto.password)
        if not result.success:
            LOGIN_COUNTER.labels(outcome="failure").inc()
            raise InvalidCredentialsError(message=result.message)

        LOGIN_COUNTER.labels(outcome="success").inc()
        return jsonify(LoginResponseDTO.from_result(result).to_json()), 200

    def logout(self) -> tuple[Response, int]:
        token = bearer_token()
        if not token:
            raise BadRequestError("No token provided")

        if not self._sessions.logout(token):
            raise BadRequestError("Logout failed")

        logger.info("auth.logout: ok")
        return jsonify(MessageDTO(message="Logged out successfully").to_json()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        return bp
