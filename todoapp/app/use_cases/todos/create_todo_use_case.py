"""
Create Todo Use Case

Appends a todo to the end of the user's list.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from todoapp.app.services.unit_of_work import UnitOfWork
from todoapp.domain.entities import Todo
from todoapp.domain.errors import ErrorCode
from todoapp.domain.positions import position_after
from .dtos import CreateTodoCommand, TodoResponse


class CreateTodoUseCase:
    """
    Business Rules:
    - New todos go after the current last one
    - The owner row is locked while the last position is read, so two
      concurrent creates never get the same position
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, command: CreateTodoCommand) -> Result[TodoResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_user_id_for_update(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND, "User not found"))

            last_position = await self.uow.todos.max_position(user.id)
            todo = Todo(
                user_id=user.id,
                description=command.description,
                position=position_after(last_position),
            )
            todo = await self.uow.todos.create(todo)

            await self.uow.commit()

            return Return.ok(TodoResponse.from_entity(todo))
