# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple


@dataclass(slots=True, frozen=True)
class UserProfile:

    user_id: str
    username: str
    email: str
    full_name: str
    created_at: datetime
    last_login_at: datetime | None = None


@dataclass(slots=True, frozen=True)
class Session:

    token: str
    user_id: str
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at


@dataclass(slots=True, frozen=True)
class AuthResult:

    success: bool
    message: str
    token: str | None = None
    user_id: str | None = None
    username: str | None = None


class SessionValidation(NamedTuple):
    valid: bool
    user_id: str | None = None
