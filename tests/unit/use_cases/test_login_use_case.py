"""
Unit tests for Login Use Case
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from todoapp.adapter.services.password_hasher import BcryptPasswordHasher
from todoapp.api.utils.jwt import JwtTokenService
from todoapp.app.services.session_store import SessionData
from todoapp.app.use_cases.auth import LoginUseCase
from todoapp.domain.entities import User
from todoapp.domain.errors import ErrorCode, SessionStoreError

PASSWORD = "SecurePass123!"
TTL = 3600


@pytest.fixture
def hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def tokens():
    return JwtTokenService(secret="unit-test-secret", lifetime_hours=1)


@pytest.fixture
def user(hasher):
    return User(
        id=1,
        user_id=uuid4(),
        email="test@example.com",
        password_hash=hasher.hash(PASSWORD),
    )


@pytest.mark.asyncio
async def test_successful_login(mock_uow, hasher, tokens, session_store, user):
    mock_uow.users.get_by_email.return_value = user

    use_case = LoginUseCase(mock_uow, hasher, tokens, session_store, TTL)
    result = await use_case.execute("test@example.com", PASSWORD)

    assert result.is_ok()
    data = result.value
    assert data.user_id == str(user.user_id)
    assert data.session_id

    # Token is bound to the new session
    claims = tokens.validate(data.access_token).value
    assert claims.subject == str(user.user_id)
    assert claims.session_id == data.session_id

    # Session record saved and bound to the user
    session = await session_store.get(data.session_id)
    assert session is not None
    assert session.user_id == str(user.user_id)


@pytest.mark.asyncio
async def test_login_wrong_password(mock_uow, hasher, tokens, session_store, user):
    mock_uow.users.get_by_email.return_value = user

    use_case = LoginUseCase(mock_uow, hasher, tokens, session_store, TTL)
    result = await use_case.execute("test@example.com", "wrongpassword")

    assert result.is_err()
    assert result.error.code == ErrorCode.INVALID_CREDENTIALS
    assert result.error.message == "Invalid email or password"
    assert len(session_store) == 0


@pytest.mark.asyncio
async def test_login_unknown_email_same_error(mock_uow, hasher, tokens, session_store):
    """Unknown email is indistinguishable from a wrong password"""
    mock_uow.users.get_by_email.return_value = None

    use_case = LoginUseCase(mock_uow, hasher, tokens, session_store, TTL)
    result = await use_case.execute("nobody@example.com", PASSWORD)

    assert result.is_err()
    assert result.error.code == ErrorCode.INVALID_CREDENTIALS
    assert result.error.message == "Invalid email or password"
    assert len(session_store) == 0


@pytest.mark.asyncio
async def test_login_clears_previous_session(mock_uow, hasher, tokens, session_store, user):
    mock_uow.users.get_by_email.return_value = user
    await session_store.set("old-session", SessionData(user_id=str(user.user_id)), TTL)

    use_case = LoginUseCase(mock_uow, hasher, tokens, session_store, TTL)
    result = await use_case.execute("test@example.com", PASSWORD, "old-session")

    assert result.is_ok()
    assert result.value.session_id != "old-session"
    assert await session_store.get("old-session") is None
    assert await session_store.get(result.value.session_id) is not None


@pytest.mark.asyncio
async def test_login_issues_fresh_session_id_each_time(mock_uow, hasher, tokens, session_store, user):
    mock_uow.users.get_by_email.return_value = user

    use_case = LoginUseCase(mock_uow, hasher, tokens, session_store, TTL)
    first = await use_case.execute("test@example.com", PASSWORD)
    second = await use_case.execute("test@example.com", PASSWORD, first.value.session_id)

    assert first.value.session_id != second.value.session_id
    assert await session_store.get(first.value.session_id) is None


@pytest.mark.asyncio
async def test_login_session_save_failure_fails_login(mock_uow, hasher, tokens, user):
    mock_uow.users.get_by_email.return_value = user
    failing_store = MagicMock()
    failing_store.rotate = AsyncMock(side_effect=SessionStoreError("redis down"))

    use_case = LoginUseCase(mock_uow, hasher, tokens, failing_store, TTL)
    result = await use_case.execute("test@example.com", PASSWORD, "old-session")

    assert result.is_err()
    assert result.error.code == ErrorCode.SESSION_STORE_FAILURE
    failing_store.rotate.assert_called_once()
    assert failing_store.rotate.call_args.args[0] == "old-session"


@pytest.mark.asyncio
async def test_login_reads_user_before_unit_of_work_closes(
    mock_uow, hasher, tokens, session_store, user
):
    """Loaded rows are expired when the unit of work rolls back on exit"""
    mock_uow.users.get_by_email.return_value = user
    expected_user_id = str(user.user_id)

    async def expire_user(*args):
        user.password_hash = "expired"
        user.user_id = None
        return False

    mock_uow.__aexit__ = AsyncMock(side_effect=expire_user)

    use_case = LoginUseCase(mock_uow, hasher, tokens, session_store, TTL)
    result = await use_case.execute("test@example.com", PASSWORD)

    assert result.is_ok()
    assert result.value.user_id == expected_user_id
    mock_uow.__aexit__.assert_awaited_once()
