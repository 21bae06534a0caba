from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SessionData(BaseModel):
    """Server-side session record, bound to one user"""

    user_id: str
    created_at: datetime = Field(default_factory=datetime.utcnow)


class ISessionStore(ABC):
    """
    Session store interface - application layer

    Implementations raise SessionStoreError when the backend is unreachable.
    """

    @abstractmethod
    async def get(self, session_id: str) -> Optional[SessionData]:
        """Get live session, None if missing or expired"""
        pass

    @abstractmethod
    async def set(self, session_id: str, data: SessionData, ttl_seconds: int) -> None:
        """Write session with a time-to-live"""
        pass

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        """Remove session (no-op if missing)"""
        pass

    @abstractmethod
    async def rotate(
        self,
        old_session_id: Optional[str],
        new_session_id: str,
        data: SessionData,
        ttl_seconds: int,
    ) -> None:
        """
        Clear the old session and write the new one as a single commit.

        Either both writes apply or neither does.
        """
        pass
