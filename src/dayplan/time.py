# SPDX-License-Identifier: MIT

import datetime
import re
from typing import TypeAlias, cast

import pendulum

DateKey: TypeAlias = str

DATE_KEY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def date_to_key(date: datetime.date) -> DateKey:
    """Convert a date to its 'YYYY-MM-DD' key."""
    return date.strftime("%Y-%m-%d")


def date_from_key(date_key: DateKey) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' key, rejecting anything that is not a real calendar date."""
    if not DATE_KEY_PATTERN.match(date_key):
        raise ValueError(f"Invalid date key '{date_key}', expected YYYY-MM-DD")
    python_date = datetime.date.fromisoformat(date_key)
    return pendulum.date(python_date.year, python_date.month, python_date.day)


def shift_date_key(date_key: DateKey, days: int) -> DateKey:
    return date_to_key(date_from_key(date_key).add(days=days))


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("dddd, MMMM D, YYYY")


def month_to_display_str(date: pendulum.Date) -> str:
    return date.format("MMMM YYYY")
