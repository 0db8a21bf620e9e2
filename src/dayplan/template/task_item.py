# SPDX-License-Identifier: MIT

from typing import Callable

import pendulum

from dayplan.model.entity_id import TaskId, generate_task_id
from dayplan.model.task_item import TaskItem
from dayplan.time import now_local


def get_task_item_template(
    text: str,
    issue_task_id: Callable[[], TaskId] = generate_task_id,
    now: Callable[[], pendulum.DateTime] = now_local,
) -> TaskItem:
    return {
        "id": issue_task_id(),
        "text": text,
        "completed": False,
        "notes": "",
        "created_at": now(),
        "move_to_next_day": False,
    }
