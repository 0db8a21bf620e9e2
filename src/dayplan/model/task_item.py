# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from dayplan.model.entity_id import TaskId


class TaskItem(TypedDict):
    id: TaskId
    text: str
    completed: bool
    notes: str
    created_at: pendulum.DateTime
    move_to_next_day: bool


def has_notes(task: TaskItem) -> bool:
    return len(task["notes"].strip()) > 0
