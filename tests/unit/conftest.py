import pytest
from unittest.mock import AsyncMock, MagicMock

from todoapp.adapter.session_store.memory_session_store import InMemorySessionStore


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_user_id = AsyncMock()
    uow.users.get_by_user_id_for_update = AsyncMock()
    uow.users.create = AsyncMock()
    uow.users.update_username = AsyncMock()
    uow.users.delete = AsyncMock()

    uow.todos = MagicMock()
    uow.todos.create = AsyncMock()
    uow.todos.get_owned = AsyncMock()
    uow.todos.list_by_owner = AsyncMock(return_value=[])
    uow.todos.search = AsyncMock(return_value=[])
    uow.todos.max_position = AsyncMock(return_value=None)
    uow.todos.update = AsyncMock()
    uow.todos.update_position = AsyncMock()
    uow.todos.renumber = AsyncMock()
    uow.todos.delete = AsyncMock()

    return uow


@pytest.fixture
def session_store():
    return InMemorySessionStore()
