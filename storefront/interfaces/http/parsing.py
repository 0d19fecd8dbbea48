# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, TypeVar

from flask import request
from pydantic import BaseModel, ValidationError

from storefront.shared.errors import BadRequestError
from storefront.shared.errors.validation import raise_validation_error

M = TypeVar("M", bound=BaseModel)


def json_body(missing_message: str) -> dict[str, Any]:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise BadRequestError(missing_message)
    return payload


def parse_body(model: type[M], missing_message: str) -> M:
    payload = json_body(missing_message)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise_validation_error(exc)


def parse_query(model: type[M]) -> M:
    try:
        return model.model_validate(request.args.to_dict())
    except ValidationError as exc:
        raise_validation_error(exc)


__all__ = ["json_body", "parse_body", "parse_query"]
