# SPDX-License-Identifier: MIT

import re
from typing import Optional

import typer

from dayplan.time import DateKey, date_from_key, date_to_key, today_local


def parse_date(date_param: Optional[str | int]) -> Optional[DateKey]:
    if date_param is None:
        return None

    date = str(date_param)

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            date_from_key(date)
        except ValueError as e:
            raise typer.BadParameter(str(e))
        return date

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return date_to_key(today_local().add(days=int(date)))

    if date == "today" or date == "t":
        return date_to_key(today_local())
    if date == "yesterday" or date == "y":
        return date_to_key(today_local().subtract(days=1))
    if date == "tomorrow" or date == "o":
        return date_to_key(today_local().add(days=1))
    raise typer.BadParameter("Incorrect date format")


def parse_position(position_param: Optional[str | int]) -> Optional[int]:
    """Convert a 1-based position shown in the task list into a list index."""
    if position_param is None:
        return None
    try:
        position = int(position_param)
    except ValueError:
        raise typer.BadParameter(f"Position must be a number, got '{position_param}'")
    if position < 1:
        raise typer.BadParameter("Positions start at 1")
    return position - 1
