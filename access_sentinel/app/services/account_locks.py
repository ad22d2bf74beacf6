"""
Per-key serialization point for read-decide-write cycles.

Admission attempts against the same account (and access request submissions
for the same requester/resource pair) must not interleave, otherwise two
concurrent failures can both read attempts_today=1 and both write 2.

A caller never waits on a key while its database transaction is open: it
either takes the key before the first read or ends the read transaction
first. Otherwise a SQLite writer holding the key can wait forever on the
waiter's SHARED lock.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Hashable


class AccountLocks:
    def __init__(self):
        self._locks: Dict[Hashable, asyncio.Lock] = {}
        self._waiters: Dict[Hashable, int] = {}

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        self._waiters[key] = self._waiters.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._waiters[key] -= 1
            if self._waiters[key] == 0:
                # Drop idle entries
                del self._waiters[key]
                del self._locks[key]

    def __len__(self) -> int:
        return len(self._locks)
