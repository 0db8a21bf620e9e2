# SPDX-License-Identifier: MIT

from typing import TypedDict

from dayplan.model.task_item import TaskItem
from dayplan.time import DateKey


class DayRecord(TypedDict):
    date: DateKey
    todos: list[TaskItem]
    notes: str
