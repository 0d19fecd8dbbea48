# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from pydantic import ValidationError

from storefront.infrastructure.auth import require_user
from storefront.infrastructure.sessions import SessionManager
from storefront.interfaces.http.dto.auth import MessageDTO
from storefront.interfaces.http.dto.profile import ProfileDTO, ProfileUpdateDTO
from storefront.interfaces.http.parsing import json_body
from storefront.shared.errors import (BadRequestError, ForbiddenError,
                                      ProfileNotFoundError)
from storefront.shared.errors.validation import raise_validation_error
from storefront.shared.logging import logger


class ProfileController:
    def __init__(self, *, sessions: SessionManager) -> None:
        self._sessions = sessions

    def get_profile(self) -> tuple[Response, int]:
        user_id = require_user(self._sessions)

        profile = self._sessions.get_user_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)

        return jsonify(ProfileDTO.from_entity(profile).to_json()), 200

    def update_profile(self) -> tuple[Response, int]:
        payload = json_body("Profile data is required")
        user_id = require_user(self._sessions)

        try:
            dto = ProfileUpdateDTO.model_validate(payload)
        except ValidationError as exc:
            raise_validation_error(exc)

        # Users may only edit their own profile.
        if dto.user_id != user_id:
            logger.warning(
                f"profile.update: forbidden (user_id={user_id}, target={dto.user_id})"
            )
            raise ForbiddenError()

        if not self._sessions.update_user_profile(user_id, dto.full_name, dto.email):
            raise BadRequestError("Profile update failed")

        return jsonify(MessageDTO(message="Profile updated successfully").to_json()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("profile", __name__)
        bp.add_url_rule("/profile", view_func=self.get_profile, methods=["GET"])
        bp.add_url_rule("/profile", view_func=self.update_profile, methods=["PUT"])
        return bp
