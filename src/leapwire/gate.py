"""Bounded admission control for outbound calls.

A ``ConcurrencyGate`` caps how many calls one client instance has in flight.
It is a thin wrapper around ``asyncio.Semaphore`` that adds introspection and
refuses unbalanced releases.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from .exceptions import ConfigurationError


class ConcurrencyGate:
    """Fixed-capacity counting gate.

    Usage:
        async with gate:
            await do_network_call()

    Capacity is set at construction and never changes. Waiters are woken in
    roughly FIFO order, as provided by ``asyncio.Semaphore``.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ConfigurationError(
                f"ConcurrencyGate capacity must be >= 1, got {capacity}"
            )
        self._capacity = capacity
        self._semaphore = asyncio.Semaphore(capacity)
        self._in_flight = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def in_flight(self) -> int:
        """Number of currently admitted callers."""
        return self._in_flight

    @property
    def available(self) -> int:
        return self._capacity - self._in_flight

    async def acquire(self) -> None:
        """Waits for a free slot.

        If the waiting task is cancelled, ``asyncio.CancelledError`` propagates
        and no slot is taken.
        """
        await self._semaphore.acquire()
        self._in_flight += 1

    def release(self) -> None:
        """Returns a slot taken by ``acquire``."""
        if self._in_flight == 0:
            raise RuntimeError("ConcurrencyGate released more times than acquired")
        self._in_flight -= 1
        self._semaphore.release()

    @asynccontextmanager
    async def slot(self) -> AsyncIterator[None]:
        """Holds one slot for the duration of the ``async with`` block."""
        await self.acquire()
        try:
            yield
        finally:
            self.release()

    async def __aenter__(self) -> "ConcurrencyGate":
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"ConcurrencyGate(capacity={self._capacity}, in_flight={self._in_flight})"
