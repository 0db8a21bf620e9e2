# SPDX-License-Identifier: MIT

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeAlias

logger = logging.getLogger(__name__)

DebouncedAction: TypeAlias = Callable[[], Awaitable[object]]


class DebounceChannel:
    """
    Coalesces bursts of triggers into a single downstream action.

    Each channel owns at most one pending timer. Scheduling a new action
    cancels the pending one, so only the last action of a burst runs, once
    the channel has been quiet for the full delay.
    """

    def __init__(self, name: str, delay_ms: int) -> None:
        self.name = name
        self.delay_ms = delay_ms
        self._handle: Optional[asyncio.TimerHandle] = None
        self._action: Optional[DebouncedAction] = None
        self._in_flight: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, action: DebouncedAction) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._action = action
        self._handle = loop.call_later(self.delay_ms / 1000, self.__fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._action = None

    async def flush(self) -> None:
        """Run the pending action now instead of waiting for the timer."""
        action = self._action
        self.cancel()
        if action is not None:
            await action()

    async def drain(self) -> None:
        """Wait for actions already handed off by the timer to finish."""
        while self._in_flight:
            await asyncio.gather(*list(self._in_flight), return_exceptions=True)

    async def close(self) -> None:
        await self.flush()
        await self.drain()

    def __fire(self) -> None:
        action = self._action
        self._handle = None
        self._action = None
        if action is None:
            return
        task = asyncio.ensure_future(self.__run(action))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    async def __run(self, action: DebouncedAction) -> None:
        try:
            await action()
        except Exception:
            # Nothing awaits a timer-fired action; the next trigger retries
            logger.exception("Debounced action on channel '%s' failed", self.name)
