"""
Login Use Case

Verifies credentials, rotates the server-side session and issues a token
bound to it.
"""

import logging
import secrets
from typing import Optional

from libs.result import Error, Result, Return
from todoapp.app.services.password_hasher import IPasswordHasher
from todoapp.app.services.session_store import ISessionStore, SessionData
from todoapp.app.services.token_service import ITokenService
from todoapp.app.services.unit_of_work import UnitOfWork
from todoapp.domain.errors import ErrorCode, SessionStoreError
from .dtos import LoginResult

logger = logging.getLogger(__name__)


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Unknown email and wrong password give the same INVALID_CREDENTIALS error
    - An unknown email still costs one hash so both paths take similar time
    - Each login gets a brand new session id; the session presented by the
      client (if any) is cleared in the same store transaction
    - The new session must be saved before the token is handed out; a store
      failure fails the whole login
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
        session_store: ISessionStore,
        session_ttl_seconds: int,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_service = token_service
        self.session_store = session_store
        self.session_ttl_seconds = session_ttl_seconds

    async def execute(
        self, email: str, password: str, current_session_id: Optional[str] = None
    ) -> Result[LoginResult]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password
            current_session_id: Session id from the client's cookie, if any

        Returns:
            Result with LoginResult (user id, token, new session id), or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                self.password_hasher.hash(password)
                return Return.err(
                    Error(ErrorCode.INVALID_CREDENTIALS, "Invalid email or password")
                )

            if not self.password_hasher.verify(user.password_hash, password):
                return Return.err(
                    Error(ErrorCode.INVALID_CREDENTIALS, "Invalid email or password")
                )

            user_id = str(user.user_id)
            session_id = new_session_id()
            access_token = self.token_service.mint(user_id, session_id)

            try:
                await self.session_store.rotate(
                    current_session_id,
                    session_id,
                    SessionData(user_id=user_id),
                    self.session_ttl_seconds,
                )
            except SessionStoreError as e:
                logger.error(f"Login session save failed: {e}")
                return Return.err(
                    Error(ErrorCode.SESSION_STORE_FAILURE, "Failed to save session")
                )

            return Return.ok(
                LoginResult(user_id=user_id, access_token=access_token, session_id=session_id)
            )
