from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.dialects import postgresql

from todoapp.adapter.repositories.user_repository import UserRepository
from todoapp.domain.entities import User


def make_session(found_user=None):
    session = MagicMock()
    lookup = MagicMock()
    lookup.one_or_none.return_value = found_user
    session.exec = AsyncMock(return_value=lookup)
    session.execute = AsyncMock(return_value=MagicMock(rowcount=1))
    session.flush = AsyncMock()
    return session


def compiled(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


@pytest.mark.asyncio
async def test_delete_locks_owner_row():
    user = User(id=7, user_id=uuid4(), email="test@example.com", password_hash="hash")
    session = make_session(found_user=user)

    deleted = await UserRepository(session).delete(user.user_id)

    assert deleted is True
    lookup_stmt = session.exec.call_args.args[0]
    assert "FOR UPDATE" in compiled(lookup_stmt)

    # Todos first, then the user
    todo_delete, user_delete = [call.args[0] for call in session.execute.call_args_list]
    assert "DELETE FROM todos" in compiled(todo_delete)
    assert "DELETE FROM users" in compiled(user_delete)


@pytest.mark.asyncio
async def test_delete_missing_user():
    session = make_session(found_user=None)

    deleted = await UserRepository(session).delete(uuid4())

    assert deleted is False
    session.execute.assert_not_called()
