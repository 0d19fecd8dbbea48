from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime, timedelta

import pytest

from storefront.application.services.credentials import SharedPasswordChecker
from storefront.domain.users import UserProfile
from storefront.infrastructure.seed_data import seed_users
from storefront.infrastructure.sessions import SessionManager, generate_token

START = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture()
def sessions(clock) -> SessionManager:
    return SessionManager(seed_users(START), SharedPasswordChecker("password"), clock=clock)


def test_authenticate_success_issues_token(sessions: SessionManager) -> None:
    result = sessions.authenticate("demo", "password")

    assert result.success is True
    assert result.token and result.token.startswith("user-001-")
    assert result.user_id == "user-001"
    assert result.username == "demo"
    assert result.message == "Login successful"
    assert sessions.active_session_count() == 1


def test_authenticate_wrong_password_creates_no_session(sessions: SessionManager) -> None:
    result = sessions.authenticate("demo", "wrong")

    assert result.success is False
    assert result.token is None
    assert result.user_id is None
    assert result.message == "Invalid username or password"
    assert sessions.active_session_count() == 0
    assert sessions.get_user_profile("user-001").last_login_at is None


def test_authenticate_unknown_user_fails(sessions: SessionManager) -> None:
    assert sessions.authenticate("nouser", "x").success is False
    assert sessions.authenticate("nouser", "password").success is False


def test_authenticate_records_last_login(sessions: SessionManager, clock) -> None:
    clock.advance(timedelta(minutes=5))
    sessions.authenticate("admin", "password")

    profile = sessions.get_user_profile("user-002")
    assert profile.last_login_at == START + timedelta(minutes=5)


def test_each_login_gets_its_own_session(sessions: SessionManager) -> None:
    first = sessions.authenticate("demo", "password")
    second = sessions.authenticate("demo", "password")

    assert first.token != second.token
    assert sessions.validate_session(first.token).valid
    assert sessions.validate_session(second.token).valid


def test_validate_rejects_empty_and_unknown_tokens(sessions: SessionManager) -> None:
    assert sessions.validate_session("") == (False, None)
    assert sessions.validate_session(None) == (False, None)
    assert sessions.validate_session("user-001-deadbeef") == (False, None)


def test_validate_does_not_renew(sessions: SessionManager, clock) -> None:
    token = sessions.authenticate("demo", "password").token

    clock.advance(timedelta(hours=23))
    assert sessions.validate_session(token) == (True, "user-001")

    clock.advance(timedelta(hours=1, seconds=1))
    assert sessions.validate_session(token) == (False, None)


def test_session_valid_exactly_at_expiry(sessions: SessionManager, clock) -> None:
    token = sessions.authenticate("demo", "password").token

    clock.advance(timedelta(hours=24))
    assert sessions.validate_session(token).valid is True


def test_expired_token_never_comes_back(sessions: SessionManager, clock) -> None:
    token = sessions.authenticate("test", "password").token
    clock.advance(timedelta(hours=25))

    assert sessions.validate_session(token).valid is False
    assert sessions.active_session_count() == 0

    clock.now = START
    assert sessions.validate_session(token).valid is False
    assert sessions.logout(token) is False


def test_custom_ttl(clock) -> None:
    manager = SessionManager(
        seed_users(START), SharedPasswordChecker("pw"), ttl=timedelta(minutes=1), clock=clock
    )
    token = manager.authenticate("demo", "pw").token

    clock.advance(timedelta(minutes=2))
    assert manager.validate_session(token).valid is False


def test_logout_revokes_token(sessions: SessionManager) -> None:
    token = sessions.authenticate("demo", "password").token

    assert sessions.logout(token) is True
    assert sessions.validate_session(token).valid is False
    assert sessions.logout(token) is False


def test_logout_unknown_or_empty_token(sessions: SessionManager) -> None:
    assert sessions.logout("") is False
    assert sessions.logout("not-a-token") is False


def test_get_user_profile(sessions: SessionManager) -> None:
    profile = sessions.get_user_profile("user-003")

    assert profile is not None
    assert profile.username == "test"
    assert profile.email == "test@example.com"
    assert sessions.get_user_profile("user-404") is None


def test_update_user_profile(sessions: SessionManager) -> None:
    assert sessions.update_user_profile("user-001", "Demo Person", "new@example.com") is True

    profile = sessions.get_user_profile("user-001")
    assert profile.full_name == "Demo Person"
    assert profile.email == "new@example.com"
    assert profile.username == "demo"


def test_update_unknown_profile_fails(sessions: SessionManager) -> None:
    assert sessions.update_user_profile("user-404", "X", "x@example.com") is False


def test_credential_checker_is_pluggable() -> None:
    class OnlyAdmin:
        def verify(self, user: UserProfile, password: str) -> bool:
            return user.username == "admin" and password == "s3cret"

    manager = SessionManager(seed_users(START), OnlyAdmin())

    assert manager.authenticate("admin", "s3cret").success is True
    assert manager.authenticate("demo", "s3cret").success is False


def test_tokens_are_not_predictable() -> None:
    tokens = {generate_token("user-001") for _ in range(1000)}

    assert len(tokens) == 1000
    assert all(len(t) == len("user-001-") + 32 for t in tokens)


def test_concurrent_logins_produce_distinct_sessions(sessions: SessionManager) -> None:
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: sessions.authenticate("demo", "password"), range(200)))

    tokens = [r.token for r in results]
    assert all(r.success for r in results)
    assert len(set(tokens)) == 200
    assert sessions.active_session_count() == 200


def test_login_validate_profile_logout_flow(sessions: SessionManager) -> None:
    token = sessions.authenticate("demo", "password").token

    valid, user_id = sessions.validate_session(token)
    assert valid is True
    assert user_id == "user-001"

    assert sessions.get_user_profile(user_id).username == "demo"

    assert sessions.logout(token) is True
    assert sessions.validate_session(token) == (False, None)
