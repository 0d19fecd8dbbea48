# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session_manager import DEFAULT_SESSION_TTL, SessionManager, generate_token

__all__ = ["DEFAULT_SESSION_TTL", "SessionManager", "generate_token"]
