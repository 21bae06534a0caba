"""Redis-backed session store."""
import logging
from typing import Optional

from pydantic import ValidationError
from redis.asyncio import Redis
from redis.exceptions import RedisError

from todoapp.app.services.session_store import ISessionStore, SessionData
from todoapp.domain.errors import SessionStoreError

logger = logging.getLogger(__name__)


class RedisSessionStore(ISessionStore):
    """Stores sessions as JSON strings under `<prefix><session_id>` with EX ttl."""

    def __init__(self, client: Redis, key_prefix: str = "session:") -> None:
        self._client = client
        self._key_prefix = key_prefix

    def _key(self, session_id: str) -> str:
        return f"{self._key_prefix}{session_id}"

    async def get(self, session_id: str) -> Optional[SessionData]:
        try:
            raw = await self._client.get(self._key(session_id))
        except RedisError as e:
            logger.error("Redis GET failed: %s", e)
            raise SessionStoreError("Failed to read session") from e

        if raw is None:
            return None
        try:
            return SessionData.model_validate_json(raw)
        except ValidationError:
            # Unreadable records are treated as absent
            logger.warning("Discarding malformed session record %s", self._key(session_id))
            return None

    async def set(self, session_id: str, data: SessionData, ttl_seconds: int) -> None:
        try:
            await self._client.set(self._key(session_id), data.model_dump_json(), ex=ttl_seconds)
        except RedisError as e:
            logger.error("Redis SET failed: %s", e)
            raise SessionStoreError("Failed to save session") from e

    async def delete(self, session_id: str) -> None:
        try:
            await self._client.delete(self._key(session_id))
        except RedisError as e:
            logger.error("Redis DEL failed: %s", e)
            raise SessionStoreError("Failed to delete session") from e

    async def rotate(
        self,
        old_session_id: Optional[str],
        new_session_id: str,
        data: SessionData,
        ttl_seconds: int,
    ) -> None:
        """DEL old + SET new inside one MULTI/EXEC transaction"""
        try:
            async with self._client.pipeline(transaction=True) as pipe:
                if old_session_id:
                    pipe.delete(self._key(old_session_id))
                pipe.set(self._key(new_session_id), data.model_dump_json(), ex=ttl_seconds)
                await pipe.execute()
        except RedisError as e:
            logger.error("Redis session rotation failed: %s", e)
            raise SessionStoreError("Failed to save session") from e
