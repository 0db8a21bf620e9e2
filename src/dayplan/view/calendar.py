# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from dayplan.configuration import WeekStart
from dayplan.model.calendar_count import CalendarCount
from dayplan.service.aggregation import badge_state, calendar_window
from dayplan.time import DateKey, date_to_key, month_to_display_str, today_local
from dayplan.view.header import header
from dayplan.view.theme import get_palette

DAY_HEADERS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def day_headers(week_start: WeekStart) -> list[str]:
    if week_start == "monday":
        return DAY_HEADERS[1:] + DAY_HEADERS[:1]
    return DAY_HEADERS


def calendar_cell(
    date: pendulum.Date,
    month: pendulum.Date,
    count: Optional[CalendarCount],
    current_date: DateKey,
) -> Text:
    palette = get_palette()
    date_key = date_to_key(date)

    day_style = ""
    if date.month != month.month:
        day_style = palette["other_month"]
    if date_key == date_to_key(today_local()):
        day_style = f"{day_style} {palette['today']}".strip()
    if date_key == current_date:
        day_style = palette["selected"]

    cell = Text()
    cell.append(f"{date.day:>2}", style=day_style)

    state = badge_state(count)
    if count is not None and state != "none":
        cell.append("\n")
        cell.append(
            f"{count['completed']}/{count['total']}", style=palette["badges"][state]
        )
    if count is not None and count["has_notes"]:
        cell.append("\n" if state == "none" else " ")
        cell.append("*", style=palette["accent"])
    return cell


def calendar_view(
    month: pendulum.Date,
    counts: dict[DateKey, CalendarCount],
    current_date: DateKey,
    week_start: WeekStart = "sunday",
) -> None:
    """
    Display the 6-week month grid with completed/total badges per day.

    Args:
        month: Any date within the month to display
        counts: Counts keyed by date for the 42 days of the grid
        current_date: The open date, highlighted in the grid
        week_start: "sunday" or "monday"
    """
    header(month_to_display_str(month), "completed/total, * marks days with notes")

    table = Table(box=box.SQUARE, show_lines=True)
    for day_header in day_headers(week_start):
        table.add_column(day_header, justify="center", min_width=5)

    dates = calendar_window(month, week_start)
    for week in range(len(dates) // 7):
        week_dates = dates[week * 7 : (week + 1) * 7]
        table.add_row(
            *[
                calendar_cell(date, month, counts.get(date_to_key(date)), current_date)
                for date in week_dates
            ]
        )

    Console().print(table)
