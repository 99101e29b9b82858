"""Debounced invocation of an async callback."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Runs `func` once input has been quiet for `delay` seconds.

    Each trigger() restarts the timer, so a burst of triggers produces a
    single call. Only the pending timer is ever cancelled: once `func` has
    started it runs to completion even if trigger() is called again.
    """

    def __init__(self, delay: float, func: Callable[[], Awaitable[None]]):
        self.delay = delay
        self._func = func
        self._timer: asyncio.Task | None = None
        # Strong references keep running calls alive until they finish
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        """True while a call is scheduled but has not started."""
        return self._timer is not None and not self._timer.done()

    def trigger(self) -> None:
        """(Re)start the timer. Must be called from a running event loop."""
        self.cancel()
        task = asyncio.create_task(self._delayed_call())
        self._timer = task
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        if self.pending:
            self._timer.cancel()
        self._timer = None

    async def wait(self) -> None:
        """Wait for scheduled and running calls to finish."""
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def _delayed_call(self) -> None:
        await asyncio.sleep(self.delay)

        # Detach from the timer slot so a later trigger() cannot cancel the call
        self._timer = None
        try:
            await self._func()
        except Exception:
            logger.exception("Debounced call failed")
