"""
Update Todo Use Case

Changes description and completion of one owned todo.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from todoapp.app.services.unit_of_work import UnitOfWork
from todoapp.domain.errors import ErrorCode
from .dtos import TodoResponse, UpdateTodoCommand


class UpdateTodoUseCase:
    """
    Business Rules:
    - The update is filtered by todo id AND owner id
    - Zero rows updated (missing or someone else's todo) is TODO_NOT_FOUND
    - Position is not writable here, see UpdateTodoPositionUseCase
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, todo_id: int, command: UpdateTodoCommand
    ) -> Result[TodoResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_user_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND, "User not found"))

            todo = await self.uow.todos.update(
                todo_id, user.id, command.description, command.completed
            )
            if todo is None:
                return Return.err(Error(ErrorCode.TODO_NOT_FOUND, "Todo not found"))

            await self.uow.commit()

            return Return.ok(TodoResponse.from_entity(todo))
