# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Callable, Optional

import pendulum

from dayplan.configuration import WeekStart
from dayplan.model.calendar_count import CalendarCount
from dayplan.model.day_record import DayRecord
from dayplan.model.entity_id import TaskId, generate_task_id
from dayplan.repository.day_record import RecordStore, StorageError
from dayplan.service.aggregation import CalendarCache
from dayplan.service.debounce import DebounceChannel
from dayplan.template.day_record import get_day_record_template
from dayplan.time import (
    DateKey,
    date_from_key,
    date_to_key,
    now_local,
    shift_date_key,
    today_local,
)

logger = logging.getLogger(__name__)


class PlannerSession:
    """
    State of one planner window: the resident day record, the selection, the
    calendar counts and the debounce channels that persist them.

    Every engine operation takes the session it acts on, so nothing is kept in
    module globals.
    """

    def __init__(
        self,
        store: RecordStore,
        current_date: Optional[DateKey] = None,
        week_start: WeekStart = "sunday",
        notes_debounce_ms: int = 1000,
        issue_task_id: Callable[[], TaskId] = generate_task_id,
        now: Callable[[], pendulum.DateTime] = now_local,
    ) -> None:
        self.store = store
        self.current_date: DateKey = current_date or date_to_key(today_local())
        self.record: DayRecord = get_day_record_template(self.current_date)
        self.selection: Optional[int] = None
        self.calendar = CalendarCache(
            store, date_from_key(self.current_date), week_start
        )
        self.notes_channel = DebounceChannel("notes", notes_debounce_ms)
        self.issue_task_id = issue_task_id
        self.now = now

    async def open(self) -> None:
        await self.load_day(self.current_date)
        await self.calendar.refresh()

    async def close(self) -> None:
        await self.notes_channel.close()

    def snapshot(self) -> DayRecord:
        return deepcopy(self.record)

    def calendar_counts(self) -> dict[DateKey, CalendarCount]:
        return deepcopy(self.calendar.counts)

    def selected_index(self) -> Optional[int]:
        if self.selection is None or self.selection >= len(self.record["todos"]):
            return None
        return self.selection

    async def load_day(self, date_key: DateKey) -> DayRecord:
        self.current_date = date_key
        try:
            self.record = await self.store.load_record(date_key)
        except StorageError as e:
            logger.error("Failed to load %s, starting empty: %s", date_key, e)
            self.record = get_day_record_template(date_key)
        return self.record

    async def save(self, record: Optional[DayRecord] = None) -> None:
        """
        Write a complete record (the resident one by default) and reconcile the
        calendar counts. A failed write raises StorageError and leaves the
        in-memory record as it is.
        """
        if record is None:
            record = self.record
        await self.store.save_record(record)
        await self.calendar.note_saved(record)

    def update_notes(self, notes: str) -> None:
        """Apply a notes edit now and persist it once typing pauses."""
        self.record["notes"] = notes
        record = self.record
        self.notes_channel.schedule(lambda: self.save(record))

    async def navigate_to_date(self, date_key: DateKey) -> DayRecord:
        # Pending notes are written now, never after the date has been left
        await self.notes_channel.drain()
        try:
            if self.notes_channel.pending:
                await self.notes_channel.flush()
            else:
                await self.save()
        except StorageError as e:
            logger.error("Failed to save %s before leaving it: %s", self.current_date, e)
        self.selection = None
        await self.load_day(date_key)
        await self.calendar.show_month(date_from_key(date_key))
        return self.record

    async def navigate_day(self, offset: int) -> DayRecord:
        return await self.navigate_to_date(shift_date_key(self.current_date, offset))

    async def go_to_today(self) -> DayRecord:
        return await self.navigate_to_date(date_to_key(today_local()))
