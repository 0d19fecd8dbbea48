# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import AuthResult, Session, SessionValidation, UserProfile
from .exceptions import InvalidCredentialsError
from .repositories import CredentialChecker

__all__ = [
    "AuthResult",
    "CredentialChecker",
    "InvalidCredentialsError",
    "Session",
    "SessionValidation",
    "UserProfile",
]
