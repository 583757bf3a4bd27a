from __future__ import annotations

import asyncio
import threading
from typing import Callable, Protocol


class Cancellable(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable:
        ...


class AsyncioScheduler:
    """
    Schedules callbacks on an asyncio loop.

    Without an explicit loop the running one is used, so ``call_later`` must
    then be invoked from inside a coroutine or loop callback.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class ThreadingScheduler:
    """Fallback for synchronous callers: each callback runs on a daemon timer thread."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


def default_scheduler() -> Scheduler:
    # bind to the loop the flow was created on; plain sync code gets timer threads
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return ThreadingScheduler()
    return AsyncioScheduler(loop)
