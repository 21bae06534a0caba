"""
Register Use Case

Creates a user account from email + password.
"""

from libs.result import Error, Result, Return
from todoapp.app.services.password_hasher import IPasswordHasher
from todoapp.app.services.unit_of_work import UnitOfWork
from todoapp.domain.entities import User
from todoapp.domain.errors import DuplicateKeyError, ErrorCode
from .dtos import RegisterCommand, RegisterResponse


class RegisterUseCase:
    """
    Use case for user registration.

    Business Rules:
    - Email must not already be registered (checked up front and by the unique index)
    - Password is stored only as a bcrypt hash
    - A fresh external UUID identifies the user from now on
    """

    def __init__(self, uow: UnitOfWork, password_hasher: IPasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated email and password

        Returns:
            Result[RegisterResponse], or Error(EMAIL_ALREADY_EXISTS)
        """
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error(ErrorCode.EMAIL_ALREADY_EXISTS, "User already registered")
                )

            user = User(
                email=command.email,
                password_hash=self.password_hasher.hash(command.password),
            )
            try:
                user = await self.uow.users.create(user)
            except DuplicateKeyError:
                # Lost a race with a concurrent registration
                return Return.err(
                    Error(ErrorCode.EMAIL_ALREADY_EXISTS, "User already registered")
                )

            await self.uow.commit()

            return Return.ok(RegisterResponse(message="User registered", user_id=str(user.user_id)))
