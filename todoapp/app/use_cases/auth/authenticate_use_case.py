"""
Authenticate Use Case

Checks a bearer token against the live server-side session.
"""

import logging
from typing import Optional

from libs.result import Error, Result, Return
from todoapp.app.services.session_store import ISessionStore
from todoapp.app.services.token_service import ITokenService
from todoapp.domain.errors import ErrorCode, SessionStoreError
from .dtos import AuthenticatedUser

logger = logging.getLogger(__name__)

UNAUTHENTICATED = Error(ErrorCode.UNAUTHENTICATED, "Invalid or expired token")


class AuthenticateUseCase:
    """
    Use case for authenticating a request.

    Business Rules:
    - A structurally valid token is not enough: its session id must match the
      session presented by the client, that session must still exist, and it
      must be bound to the token's subject
    - This is what makes logout effective against unexpired tokens
    - Every rejection returns the same UNAUTHENTICATED error
    - An unreachable session store is an internal failure, not a rejection
    """

    def __init__(self, token_service: ITokenService, session_store: ISessionStore):
        self.token_service = token_service
        self.session_store = session_store

    async def execute(
        self, token: Optional[str], session_id: Optional[str]
    ) -> Result[AuthenticatedUser]:
        """
        Args:
            token: Bearer token from the Authorization header
            session_id: Session id from the session cookie

        Returns:
            Result with AuthenticatedUser, or Error(UNAUTHENTICATED / SESSION_STORE_FAILURE)
        """
        if not token:
            return Return.err(UNAUTHENTICATED)

        claims_result = self.token_service.validate(token)
        if claims_result.is_err():
            logger.info(f"Token rejected: {claims_result.error.code.value}")
            return Return.err(UNAUTHENTICATED)
        claims = claims_result.value

        if not session_id or claims.session_id != session_id:
            logger.info("Token rejected: session id mismatch")
            return Return.err(UNAUTHENTICATED)

        try:
            session = await self.session_store.get(session_id)
        except SessionStoreError:
            return Return.err(
                Error(ErrorCode.SESSION_STORE_FAILURE, "Failed to read session")
            )

        if session is None or session.user_id != claims.subject:
            logger.info("Token rejected: no live session for subject")
            return Return.err(UNAUTHENTICATED)

        return Return.ok(AuthenticatedUser(user_id=claims.subject, session_id=session_id))
