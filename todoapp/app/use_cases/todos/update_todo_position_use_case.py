"""
Update Todo Position Use Case

Moves one todo between two neighbors by giving it a new sparse position key.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from todoapp.app.services.unit_of_work import UnitOfWork
from todoapp.domain.errors import ErrorCode
from todoapp.domain.positions import (
    PositionSpaceExhausted,
    position_between,
    rebalanced_positions,
    resolve_slot,
)
from .dtos import TodoResponse, UpdateTodoPositionCommand

logger = logging.getLogger(__name__)


class UpdateTodoPositionUseCase:
    """
    Use case for reordering a todo.

    Business Rules:
    - Runs as one read-modify-write under the owner's row lock, so concurrent
      moves of the same user's todos are serialized
    - Neighbor keys from the client are only hints: the slot is re-derived
      from the positions stored right now (see positions.resolve_slot)
    - The new key lies strictly between the stored neighbors and only the
      moved row changes
    - When the neighbors are adjacent integers, the rest of the list is
      renumbered first, inside the same transaction
    - A todo that is missing or owned by someone else is TODO_NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, todo_id: int, command: UpdateTodoPositionCommand
    ) -> Result[TodoResponse]:
        """
        Execute reposition use case.

        Args:
            user_id: External UUID of the authenticated user
            todo_id: Todo to move
            command: Neighbor keys as seen by the client

        Returns:
            Result with the moved todo, or Error
        """
        if (
            command.prev_pos is not None
            and command.next_pos is not None
            and command.prev_pos >= command.next_pos
        ):
            return Return.err(
                Error(ErrorCode.VALIDATION_ERROR, "prev_pos must be lower than next_pos")
            )

        async with self.uow:
            # Per-user lock, held until commit/rollback
            user = await self.uow.users.get_by_user_id_for_update(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND, "User not found"))

            todo = await self.uow.todos.get_owned(todo_id, user.id)
            if todo is None:
                return Return.err(Error(ErrorCode.TODO_NOT_FOUND, "Todo not found"))

            siblings = [t for t in await self.uow.todos.list_by_owner(user.id) if t.id != todo.id]
            positions = [t.position for t in siblings]
            slot = resolve_slot(positions, command.prev_pos, command.next_pos)

            try:
                new_position = position_between(*slot.neighbors(positions))
            except PositionSpaceExhausted as e:
                logger.info(f"Renumbering {len(siblings)} todos of user {user.id}: {e}")
                positions = rebalanced_positions(len(siblings))
                await self.uow.todos.renumber(
                    user.id, {t.id: p for t, p in zip(siblings, positions)}
                )
                new_position = position_between(*slot.neighbors(positions))

            moved = await self.uow.todos.update_position(todo.id, user.id, new_position)
            if moved is None:
                return Return.err(Error(ErrorCode.TODO_NOT_FOUND, "Todo not found"))

            await self.uow.commit()

            return Return.ok(TodoResponse.from_entity(moved))
