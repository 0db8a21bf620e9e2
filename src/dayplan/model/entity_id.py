# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

TaskId: TypeAlias = str


def generate_task_id() -> TaskId:
    return str(uuid.uuid4())
