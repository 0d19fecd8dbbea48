# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Masking of credentials and personal data in log output."""

from __future__ import annotations

import hashlib
import re
from collections.abc import Mapping
from typing import Any, NamedTuple

REDACTED = "***REDACTED***"


class _Rule(NamedTuple):
    pattern: re.Pattern[str]
    replacement: str


def _rule(pattern: str, replacement: str, flags: int = 0) -> _Rule:
    return _Rule(re.compile(pattern, flags), replacement)


_RULES: tuple[_Rule, ...] = (
    # "<user id>-<32 hex>" as issued by the session manager
    _rule(r"\b([A-Za-z0-9_]+-[A-Za-z0-9_]+-)[0-9a-f]{32}\b", rf"\1{REDACTED}"),
    _rule(r"(bearer\s+)[A-Za-z0-9_\-.]{20,}", rf"\1{REDACTED}", re.IGNORECASE),
    _rule(r"(authorization\s*:\s*['\"]?)[^'\"]{10,}", rf"\1{REDACTED}", re.IGNORECASE),
    _rule(r"(token\s*[:=]\s*['\"]?)[A-Za-z0-9_\-.]{20,}", rf"\1{REDACTED}"),
    _rule(r"((?:password|pwd)\s*[:=]\s*['\"]?)[^'\"\s,}]+", rf"\1{REDACTED}", re.IGNORECASE),
    # keep the domain, drop the mailbox
    _rule(r"[A-Za-z0-9._%+-]+@([A-Za-z0-9.-]+\.[A-Za-z]{2,})", r"***@\1"),
)

_SECRET_HEADERS = frozenset({"authorization", "cookie", "x-api-key", "x-auth-token"})
_SECRET_KEY_PARTS = ("password", "token", "secret", "auth", "key")


def sanitize_message(message: str) -> str:
    for rule in _RULES:
        message = rule.pattern.sub(rule.replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru sink filter; rewrites the message in place and never drops it."""
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True


def sanitize_mapping(values: Mapping[str, Any], *, headers: bool = False) -> dict[str, Any]:
    """Copy of ``values`` safe for logging.

    Secret headers are replaced by a short digest so repeated requests from
    one client can still be correlated. Other secret-looking keys are blanked.
    """
    cleaned: dict[str, Any] = {}
    for key, value in values.items():
        lowered = key.lower()
        if headers and lowered in _SECRET_HEADERS:
            digest = hashlib.sha256(str(value).encode()).hexdigest()[:8]
            cleaned[key] = f"<sha256:{digest}>"
        elif not headers and any(part in lowered for part in _SECRET_KEY_PARTS):
            cleaned[key] = "<redacted>"
        else:
            cleaned[key] = value
    return cleaned


__all__ = ["REDACTED", "sanitize_mapping", "sanitize_message", "sanitize_record"]
