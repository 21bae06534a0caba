"""
Delete Todo Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from todoapp.app.services.unit_of_work import UnitOfWork
from todoapp.domain.errors import ErrorCode


class DeleteTodoUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, todo_id: int) -> Result[None]:
        async with self.uow:
            user = await self.uow.users.get_by_user_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND, "User not found"))

            deleted = await self.uow.todos.delete(todo_id, user.id)
            if not deleted:
                return Return.err(Error(ErrorCode.TODO_NOT_FOUND, "Todo not found"))

            await self.uow.commit()

            return Return.ok(None)
