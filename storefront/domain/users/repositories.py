# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import UserProfile


class CredentialChecker(Protocol):
    def verify(self, user: UserProfile, password: str) -> bool: ...
