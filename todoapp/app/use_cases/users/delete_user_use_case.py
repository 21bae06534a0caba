"""
Delete User Use Case

Removes the account and every todo it owns.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from todoapp.app.services.unit_of_work import UnitOfWork
from todoapp.domain.errors import ErrorCode


class DeleteUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[None]:
        async with self.uow:
            deleted = await self.uow.users.delete(user_id)
            if not deleted:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND, "User not found"))

            await self.uow.commit()

            return Return.ok(None)
