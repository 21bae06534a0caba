"""
List Todos Use Case

Reads the user's todos in display order, optionally filtered by keyword.
"""

from typing import List, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from todoapp.app.services.unit_of_work import UnitOfWork
from todoapp.domain.errors import ErrorCode
from .dtos import TodoResponse


class ListTodosUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[List[TodoResponse]]:
        """All todos of the user, ordered by position"""
        return await self._load(user_id, keyword=None)

    async def search(self, user_id: UUID, keyword: str) -> Result[List[TodoResponse]]:
        """Todos whose description contains keyword (case-insensitive)"""
        keyword = keyword.strip()
        if not keyword:
            return Return.err(Error(ErrorCode.VALIDATION_ERROR, "Keyword is required"))
        return await self._load(user_id, keyword=keyword)

    async def _load(self, user_id: UUID, keyword: Optional[str]) -> Result[List[TodoResponse]]:
        async with self.uow:
            user = await self.uow.users.get_by_user_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND, "User not found"))

            if keyword is None:
                todos = await self.uow.todos.list_by_owner(user.id)
            else:
                todos = await self.uow.todos.search(user.id, keyword)

            return Return.ok([TodoResponse.from_entity(todo) for todo in todos])
