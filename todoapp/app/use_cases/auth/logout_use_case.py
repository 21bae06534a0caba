"""
Logout Use Case

Terminates the server-side session so that tokens bound to it stop working.
"""

import logging

from libs.result import Error, Result, Return
from todoapp.app.services.session_store import ISessionStore
from todoapp.domain.errors import ErrorCode, SessionStoreError

logger = logging.getLogger(__name__)


class LogoutUseCase:
    def __init__(self, session_store: ISessionStore):
        self.session_store = session_store

    async def execute(self, session_id: str) -> Result[None]:
        try:
            await self.session_store.delete(session_id)
        except SessionStoreError as e:
            logger.error(f"Logout failed: {e}")
            return Return.err(Error(ErrorCode.SESSION_STORE_FAILURE, "Failed to log out"))

        return Return.ok(None)
