"""
In-memory TTL cache for normalized collection data.

Entries are (value, timestamp) pairs keyed by resource name. An entry is
stale once ``now - timestamp >= ttl``; stale entries are skipped on read and
overwritten by the next successful fetch, never swept in the background.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    timestamp: float


class TTLCache:
    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        # One lock per key so concurrent misses run the producer once.
        self._locks: Dict[str, asyncio.Lock] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def _fresh_entry(self, key: str, ttl_seconds: float) -> Optional[CacheEntry]:
        entry = self._entries.get(key)
        if entry is None or self._clock() - entry.timestamp >= ttl_seconds:
            return None
        return entry

    def get(self, key: str, ttl_seconds: float) -> Optional[Any]:
        entry = self._fresh_entry(key, ttl_seconds)
        return entry.value if entry is not None else None

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = CacheEntry(value=value, timestamp=self._clock())

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    async def get_or_fetch(
        self,
        key: str,
        ttl_seconds: float,
        producer: Callable[[], Awaitable[Any]],
    ) -> Any:
        entry = self._fresh_entry(key, ttl_seconds)
        if entry is not None:
            return entry.value

        lock = self._locks.setdefault(key, asyncio.Lock())
        async with lock:
            # Another caller may have filled the entry while we waited.
            entry = self._fresh_entry(key, ttl_seconds)
            if entry is not None:
                return entry.value

            value = await producer()
            self.set(key, value)
            return value
