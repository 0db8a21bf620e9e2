# SPDX-License-Identifier: MIT

import asyncio
import logging
from typing import Optional

import pendulum

from dayplan.configuration import WeekStart
from dayplan.model.calendar_count import BadgeState, CalendarCount
from dayplan.model.day_record import DayRecord
from dayplan.repository.day_record import RecordStore, StorageError
from dayplan.time import DateKey, date_from_key, date_to_key

logger = logging.getLogger(__name__)

CALENDAR_WINDOW_DAYS = 42

_WEEK_START_ISO_WEEKDAY: dict[str, int] = {"monday": 1, "sunday": 7}


def empty_count() -> CalendarCount:
    return {"total": 0, "completed": 0, "has_notes": False}


def summarize_record(record: DayRecord) -> CalendarCount:
    return {
        "total": len(record["todos"]),
        "completed": len([todo for todo in record["todos"] if todo["completed"]]),
        "has_notes": len(record["notes"].strip()) > 0,
    }


def badge_state(count: Optional[CalendarCount]) -> BadgeState:
    if count is None or count["total"] == 0:
        return "none"
    if count["completed"] == count["total"]:
        return "all-complete"
    if count["completed"] > 0:
        return "partial-complete"
    return "none-complete"


def calendar_window(
    month: pendulum.Date, week_start: WeekStart = "sunday"
) -> list[pendulum.Date]:
    """
    Get the 42 dates (6 full weeks) of the month grid containing `month`.

    The grid starts on the first day of the week on or before the 1st of the
    month and is padded with days of the adjacent months.

    Args:
        month: Any date inside the month to display
        week_start: "sunday" or "monday"

    Returns:
        List of 42 consecutive dates
    """
    first_of_month = month.start_of("month")
    leading_days = (
        first_of_month.isoweekday() - _WEEK_START_ISO_WEEKDAY[week_start]
    ) % 7
    grid_start = first_of_month.subtract(days=leading_days)
    return [grid_start.add(days=offset) for offset in range(CALENDAR_WINDOW_DAYS)]


async def load_count(store: RecordStore, date_key: DateKey) -> CalendarCount:
    try:
        record = await store.load_record(date_key)
    except StorageError as e:
        logger.warning("Counting %s as empty, load failed: %s", date_key, e)
        return empty_count()
    return summarize_record(record)


async def load_calendar_counts(
    store: RecordStore, dates: list[pendulum.Date]
) -> dict[DateKey, CalendarCount]:
    """
    Load every date concurrently and reduce each record to its counts.

    A failed load degrades that single date to zero counts; it never aborts
    the other loads.
    """
    date_keys = [date_to_key(date) for date in dates]
    counts = await asyncio.gather(
        *[load_count(store, date_key) for date_key in date_keys]
    )
    return dict(zip(date_keys, counts))


class CalendarCache:
    """Counts for the 42-day window around the month shown in the calendar."""

    def __init__(
        self,
        store: RecordStore,
        month: pendulum.Date,
        week_start: WeekStart = "sunday",
    ) -> None:
        self.store = store
        self.week_start = week_start
        self.month = month.start_of("month")
        self.counts: dict[DateKey, CalendarCount] = {}

    @property
    def dates(self) -> list[pendulum.Date]:
        return calendar_window(self.month, self.week_start)

    def in_window(self, date_key: DateKey) -> bool:
        dates = self.dates
        return dates[0] <= date_from_key(date_key) <= dates[-1]

    def get_count(self, date_key: DateKey) -> CalendarCount:
        return self.counts.get(date_key, empty_count())

    async def refresh(self) -> dict[DateKey, CalendarCount]:
        self.counts = await load_calendar_counts(self.store, self.dates)
        return self.counts

    async def show_month(self, date: pendulum.Date) -> dict[DateKey, CalendarCount]:
        self.month = date.start_of("month")
        return await self.refresh()

    async def navigate_month(self, offset: int) -> dict[DateKey, CalendarCount]:
        return await self.show_month(self.month.add(months=offset))

    async def note_saved(self, record: DayRecord) -> bool:
        """
        Reconcile the cache with a record that was just saved.

        Returns True when the summary changed and the window was reloaded.
        """
        if not self.in_window(record["date"]):
            return False
        summary = summarize_record(record)
        if self.counts.get(record["date"]) == summary:
            return False
        self.counts[record["date"]] = summary
        await self.refresh()
        return True
