"""
In-process per-flight mutual exclusion.

Seat read-modify-write sequences for one flight queue on the same asyncio.Lock,
so requests served by this process never contend for the flight row in the
database. Correctness across processes is carried by the conditional UPDATE
statements in the flight repository; this registry only removes local contention.
"""

import asyncio
from collections import defaultdict
from contextlib import asynccontextmanager
from typing import AsyncIterator, DefaultDict

from src.platform.logging.loguru_io import Logger


class FlightLockRegistry:
    def __init__(self) -> None:
        self._locks: DefaultDict[int, asyncio.Lock] = defaultdict(asyncio.Lock)
        self._waiters: DefaultDict[int, int] = defaultdict(int)

    @asynccontextmanager
    async def hold(self, *, flight_id: int) -> AsyncIterator[None]:
        self._waiters[flight_id] += 1
        lock = self._locks[flight_id]
        try:
            async with lock:
                Logger.base.debug(f'🔒 [LOCK] flight={flight_id} acquired')
                yield
        finally:
            self._waiters[flight_id] -= 1
            if not self._waiters[flight_id]:
                # Last holder out drops the entry
                del self._waiters[flight_id]
                self._locks.pop(flight_id, None)
