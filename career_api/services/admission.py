"""Admission control for career page fetches.

A fixed number of permits bounds how many origin requests are in flight at
once. Waiters queue on an asyncio.BoundedSemaphore with no timeout.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

logger = logging.getLogger("uvicorn.error")

DEFAULT_CAPACITY = 20


class AdmissionController:
    """Counting gate in front of the origin."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._semaphore = asyncio.BoundedSemaphore(capacity)
        self._in_flight = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def in_flight(self) -> int:
        """Permits currently held."""
        return self._in_flight

    @property
    def available(self) -> int:
        return self._capacity - self._in_flight

    async def acquire(self) -> None:
        """Take a permit, suspending until one is free."""
        if self._semaphore.locked():
            logger.debug(f"Admission saturated ({self._capacity} in flight), waiting")
        await self._semaphore.acquire()
        self._in_flight += 1

    def release(self) -> None:
        """Return a permit.

        Raises:
            ValueError: If no permit is held.
        """
        self._semaphore.release()
        self._in_flight -= 1

    @asynccontextmanager
    async def permit(self) -> AsyncIterator[None]:
        """Hold a permit for the duration of the block."""
        await self.acquire()
        try:
            yield
        finally:
            self.release()
