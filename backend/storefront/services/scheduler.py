"""
Scheduler — cancellable one-shot and periodic callbacks.

Payment sessions own every handle they create and cancel them on each exit
path. The asyncio implementation runs callbacks on the server's event loop,
so session state is only ever touched from one thread.
"""
import asyncio
from typing import Callable, Optional, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...

    def call_every(self, interval: float, callback: Callable[[], None]) -> TimerHandle: ...


class RepeatingHandle:
    """Periodic timer built from re-armed one-shot loop callbacks."""

    def __init__(self, loop: asyncio.AbstractEventLoop, interval: float, callback: Callable[[], None]):
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._cancelled = False
        self._handle: Optional[asyncio.TimerHandle] = None
        self._arm()

    def _arm(self):
        self._handle = self._loop.call_later(self._interval, self._fire)

    def _fire(self):
        if self._cancelled:
            return
        # Re-arm first so the callback may cancel us.
        self._arm()
        self._callback()

    def cancel(self) -> None:
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def cancelled(self) -> bool:
        return self._cancelled


class AsyncioScheduler:
    """Scheduler bound to the running event loop at call time."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return asyncio.get_running_loop().call_later(delay, callback)

    def call_every(self, interval: float, callback: Callable[[], None]) -> RepeatingHandle:
        return RepeatingHandle(asyncio.get_running_loop(), interval, callback)
