# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dayplan.model.day_record import DayRecord
from dayplan.model.task_item import TaskItem, has_notes
from dayplan.time import date_from_key, date_to_display_str
from dayplan.view.header import header
from dayplan.view.theme import get_palette


def task_line(task: TaskItem, is_selected: bool) -> Text:
    palette = get_palette()
    line = Text()
    line.append("[x] " if task["completed"] else "[ ] ")
    style = palette["completed"] if task["completed"] else ""
    if is_selected:
        style = palette["selected"]
    line.append(task["text"], style=style)
    if has_notes(task):
        line.append(" (notes)", style=palette["muted"])
    return line


def day_view(
    record: DayRecord,
    selection: Optional[int] = None,
    show_task_notes: bool = False,
    show_day_notes: bool = True,
) -> None:
    """
    Display the tasks and notes of one day.

    Args:
        record: The day record to display
        selection: Index of the task targeted by the focus timer
        show_task_notes: Whether to print each task's notes under it
        show_day_notes: Whether to print the day's free-form notes
    """
    palette = get_palette()
    completed = len([task for task in record["todos"] if task["completed"]])
    header(
        date_to_display_str(date_from_key(record["date"])),
        f"{completed}/{len(record['todos'])} completed",
    )

    console = Console()

    if not record["todos"]:
        console.print(Text("\n No tasks for this day", style=palette["muted"]))
    else:
        table = Table(box=box.SIMPLE, show_header=False, pad_edge=True)
        table.add_column("#", justify="right", style=palette["muted"])
        table.add_column("Task")
        for index, task in enumerate(record["todos"]):
            table.add_row(str(index + 1), task_line(task, index == selection))
            if show_task_notes and has_notes(task):
                table.add_row("", Text(task["notes"], style=palette["muted"]))
        console.print(table)

    if show_day_notes and record["notes"].strip():
        console.print(Panel(record["notes"], title="Notes", box=box.ROUNDED))
