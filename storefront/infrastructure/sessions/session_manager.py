# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token sessions over a small fixed user directory."""

from __future__ import annotations

import dataclasses
import secrets
from collections.abc import Callable, Iterable
from datetime import UTC, datetime, timedelta
from threading import Lock

from storefront.domain.users import (
    AuthResult,
    CredentialChecker,
    Session,
    SessionValidation,
    UserProfile,
)
from storefront.shared.logging import logger

DEFAULT_SESSION_TTL = timedelta(hours=24)

LOGIN_OK = "Login successful"
LOGIN_FAILED = "Invalid username or password"


def _utcnow() -> datetime:
    return datetime.now(UTC)


def generate_token(user_id: str) -> str:
    return f"{user_id}-{secrets.token_hex(16)}"


class SessionManager:
    """Issues, validates and revokes opaque session tokens.

    The user directory and the session map each have their own lock and no
    method holds both at once. Expected failures come back as ``False``,
    ``None`` or an unsuccessful :class:`AuthResult`, never as exceptions.
    """

    def __init__(
        self,
        users: Iterable[UserProfile],
        credentials: CredentialChecker,
        *,
        ttl: timedelta = DEFAULT_SESSION_TTL,
        clock: Callable[[], datetime] = _utcnow,
        token_factory: Callable[[str], str] = generate_token,
    ) -> None:
        self._users: dict[str, UserProfile] = {user.username: user for user in users}
        self._users_lock = Lock()
        self._sessions: dict[str, Session] = {}
        self._sessions_lock = Lock()
        self._credentials = credentials
        self._ttl = ttl
        self._clock = clock
        self._token_factory = token_factory
        logger.debug(f"SessionManager: initialized users={len(self._users)} ttl={ttl}")

    def authenticate(self, username: str, password: str) -> AuthResult:
        logger.info(f"auth.login: attempt username={username}")
        with self._users_lock:
            user = self._users.get(username)

        if user is None or not self._credentials.verify(user, password):
            logger.warning(f"auth.login: failed username={username}")
            return AuthResult(success=False, message=LOGIN_FAILED)

        now = self._clock()
        session = Session(
            token=self._token_factory(user.user_id),
            user_id=user.user_id,
            expires_at=now + self._ttl,
        )
        with self._sessions_lock:
            self._sessions[session.token] = session

        with self._users_lock:
            current = self._users.get(username, user)
            self._users[username] = dataclasses.replace(current, last_login_at=now)

        logger.info(f"auth.login: ok username={username} user_id={user.user_id}")
        return AuthResult(
            success=True,
            message=LOGIN_OK,
            token=session.token,
            user_id=user.user_id,
            username=user.username,
        )

    def validate_session(self, token: str | None) -> SessionValidation:
        if not token:
            logger.warning("auth.validate: missing token")
            return SessionValidation(False)

        now = self._clock()
        with self._sessions_lock:
            session = self._sessions.get(token)
            expired = session is not None and session.is_expired(now)
            if expired:
                del self._sessions[token]

        if session is None:
            logger.warning("auth.validate: token not found")
            return SessionValidation(False)
        if expired:
            logger.warning(f"auth.validate: expired user_id={session.user_id}")
            return SessionValidation(False)

        logger.debug(f"auth.validate: ok user_id={session.user_id}")
        return SessionValidation(True, session.user_id)

    def get_user_profile(self, user_id: str) -> UserProfile | None:
        with self._users_lock:
            user = next((u for u in self._users.values() if u.user_id == user_id), None)

        if user is None:
            logger.warning(f"profile.get: not_found user_id={user_id}")
            return None
        logger.info(f"profile.get: ok user_id={user_id} username={user.username}")
        return user

    def update_user_profile(self, user_id: str, full_name: str, email: str) -> bool:
        with self._users_lock:
            user = next((u for u in self._users.values() if u.user_id == user_id), None)
            if user is not None:
                self._users[user.username] = dataclasses.replace(
                    user, full_name=full_name, email=email
                )

        if user is None:
            logger.warning(f"profile.update: not_found user_id={user_id}")
            return False
        logger.info(f"profile.update: ok user_id={user_id}")
        return True

    def logout(self, token: str | None) -> bool:
        if not token:
            logger.warning("auth.logout: missing token")
            return False

        with self._sessions_lock:
            session = self._sessions.pop(token, None)

        if session is None:
            logger.warning("auth.logout: token not found")
            return False
        logger.info(f"auth.logout: ok user_id={session.user_id}")
        return True

    def active_session_count(self) -> int:
        with self._sessions_lock:
            return len(self._sessions)


__all__ = ["DEFAULT_SESSION_TTL", "SessionManager", "generate_token"]
