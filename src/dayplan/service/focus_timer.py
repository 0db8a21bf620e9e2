# SPDX-License-Identifier: MIT

import asyncio
import logging
from typing import Callable, Optional

from dayplan.service.notifier import Notifier
from dayplan.service.session import PlannerSession
from dayplan.service.task_list import TaskValidationError

logger = logging.getLogger(__name__)

DEFAULT_TASK_LABEL = "Focus session"


def format_countdown(remaining_seconds: int) -> str:
    minutes, seconds = divmod(max(remaining_seconds, 0), 60)
    return f"{minutes:02d}:{seconds:02d}"


class FocusTimer:
    """Countdown bound to the selected task of a session."""

    def __init__(
        self,
        session: PlannerSession,
        notifier: Notifier,
        tick_seconds: float = 1.0,
    ) -> None:
        self.session = session
        self.notifier = notifier
        self.tick_seconds = tick_seconds
        self._task: Optional[asyncio.Task[bool]] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(
        self,
        duration_seconds: int,
        on_tick: Optional[Callable[[int], None]] = None,
    ) -> asyncio.Task[bool]:
        index = self.session.selected_index()
        if index is None:
            raise TaskValidationError("Select a task before starting the timer")
        if self.session.record["todos"][index]["completed"]:
            raise TaskValidationError("The selected task is already completed")
        if duration_seconds <= 0:
            raise TaskValidationError("Timer duration must be greater than zero")
        if self.running:
            raise TaskValidationError("A focus timer is already running")

        self._task = asyncio.ensure_future(self.__countdown(duration_seconds, on_tick))
        return self._task

    def stop(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def wait(self) -> bool:
        """Return True when the countdown ran out, False when it was stopped."""
        if self._task is None:
            return False
        try:
            return await self._task
        except asyncio.CancelledError:
            return False

    def current_label(self) -> str:
        index = self.session.selected_index()
        if index is None:
            return DEFAULT_TASK_LABEL
        return self.session.record["todos"][index]["text"]

    async def __countdown(
        self, duration_seconds: int, on_tick: Optional[Callable[[int], None]]
    ) -> bool:
        remaining = duration_seconds
        if on_tick is not None:
            on_tick(remaining)
        while remaining > 0:
            await asyncio.sleep(self.tick_seconds)
            remaining -= 1
            if on_tick is not None:
                on_tick(remaining)
        self.__announce(self.current_label())
        return True

    def __announce(self, task_label: str) -> None:
        try:
            self.notifier.notify_timer_complete(task_label)
        except Exception:
            logger.warning("Timer notification failed", exc_info=True)
        try:
            self.notifier.request_foreground()
        except Exception:
            logger.warning("Could not bring the planner to the foreground", exc_info=True)


async def complete_selected(session: PlannerSession) -> Optional[int]:
    """Mark the timed task as done and clear the selection."""
    index = session.selected_index()
    if index is None:
        return None
    session.record["todos"][index]["completed"] = True
    session.selection = None
    await session.save()
    return index
