"""In-process session store, for local runs (CACHE_BACKEND=memory) and tests."""
import asyncio
import time
from typing import Dict, Optional, Tuple

from todoapp.app.services.session_store import ISessionStore, SessionData


class InMemorySessionStore(ISessionStore):
    def __init__(self) -> None:
        self._records: Dict[str, Tuple[SessionData, float]] = {}
        self._lock = asyncio.Lock()

    def _sweep(self, now: float) -> None:
        """Drop expired records; caller holds the lock"""
        expired = [sid for sid, (_, expires_at) in self._records.items() if expires_at <= now]
        for session_id in expired:
            del self._records[session_id]

    async def get(self, session_id: str) -> Optional[SessionData]:
        async with self._lock:
            record = self._records.get(session_id)
            if record is None:
                return None
            data, expires_at = record
            if expires_at <= time.monotonic():
                del self._records[session_id]
                return None
            return data

    async def set(self, session_id: str, data: SessionData, ttl_seconds: int) -> None:
        async with self._lock:
            now = time.monotonic()
            self._sweep(now)
            self._records[session_id] = (data, now + ttl_seconds)

    async def delete(self, session_id: str) -> None:
        async with self._lock:
            self._records.pop(session_id, None)

    async def rotate(
        self,
        old_session_id: Optional[str],
        new_session_id: str,
        data: SessionData,
        ttl_seconds: int,
    ) -> None:
        async with self._lock:
            now = time.monotonic()
            self._sweep(now)
            if old_session_id:
                self._records.pop(old_session_id, None)
            self._records[new_session_id] = (data, now + ttl_seconds)

    def __len__(self) -> int:
        return len(self._records)
