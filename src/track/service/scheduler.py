# SPDX-License-Identifier: MIT

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, TypeAlias

logger = logging.getLogger(__name__)

Flush: TypeAlias = Callable[[], Awaitable[Any]]

DEFAULT_DELAY_SECONDS = 0.15


class PersistScheduler:
    """
    Trailing debounce between state commits and durable writes.

    Every schedule() call re-arms one timer, so a burst of commits inside
    the window becomes a single flush. The flush callable reads the state
    when it runs, never when it was scheduled. Flushes run one after
    another and their failures are logged here and go no further.
    """

    def __init__(self, delay: float = DEFAULT_DELAY_SECONDS) -> None:
        if delay < 0:
            raise ValueError("delay must not be negative")
        self._delay = delay
        self._handle: Optional[asyncio.TimerHandle] = None
        self._pending: Optional[Flush] = None
        self._in_flight: Optional[asyncio.Task[None]] = None

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        return self._pending is not None

    @property
    def busy(self) -> bool:
        return self._in_flight is not None and not self._in_flight.done()

    def schedule(self, flush: Flush) -> None:
        self._pending = flush
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop to time against, the flush waits for drain()
            return
        self._handle = loop.call_later(self._delay, self._fire)

    def _fire(self) -> None:
        self._handle = None
        flush = self._pending
        self._pending = None
        if flush is None:
            return
        self._in_flight = asyncio.ensure_future(self._run(flush, self._in_flight))

    async def _run(
        self, flush: Flush, previous: Optional["asyncio.Task[None]"]
    ) -> None:
        if previous is not None and not previous.done():
            await asyncio.wait([previous])
        try:
            await flush()
        except Exception:
            logger.exception("persist flush failed")

    async def drain(self) -> None:
        """Run any waiting flush now and wait for all flush work to finish."""
        while True:
            if self._handle is not None:
                self._handle.cancel()
                self._handle = None
            if self._pending is not None:
                self._fire()
            if self._in_flight is None or self._in_flight.done():
                return
            await asyncio.wait([self._in_flight])
