# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Credential checking strategies."""

from __future__ import annotations

import secrets

from storefront.domain.users.entities import UserProfile
from storefront.domain.users.repositories import CredentialChecker


class SharedPasswordChecker(CredentialChecker):
    """Accepts one development password for every known user."""

    def __init__(self, password: str) -> None:
        self._password = password

    def verify(self, user: UserProfile, password: str) -> bool:  # noqa: ARG002
        return secrets.compare_digest(password.encode(), self._password.encode())
