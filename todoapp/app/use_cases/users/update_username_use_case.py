"""
Update Username Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from todoapp.app.services.unit_of_work import UnitOfWork
from todoapp.domain.errors import ErrorCode
from .dtos import UserProfile


class UpdateUsernameUseCase:
    """
    Use case for changing the display name.

    Business Rules:
    - Only the authenticated user's own record is touched
    - Zero rows updated means the user no longer exists (USER_NOT_FOUND)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, username: str) -> Result[UserProfile]:
        async with self.uow:
            user = await self.uow.users.update_username(user_id, username)
            if user is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND, "User not found"))

            await self.uow.commit()

            return Return.ok(
                UserProfile(user_id=str(user.user_id), username=user.username, email=user.email)
            )
