"""
Get Me Use Case

Loads the authenticated user's profile.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from todoapp.app.services.unit_of_work import UnitOfWork
from todoapp.domain.errors import ErrorCode
from .dtos import UserProfile


class GetMeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserProfile]:
        async with self.uow:
            user = await self.uow.users.get_by_user_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND, "User not found"))

            return Return.ok(
                UserProfile(user_id=str(user.user_id), username=user.username, email=user.email)
            )
