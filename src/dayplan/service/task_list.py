# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from dayplan.model.day_record import DayRecord
from dayplan.model.entity_id import TaskId
from dayplan.model.task_item import TaskItem
from dayplan.repository.day_record import StorageError
from dayplan.service.session import PlannerSession
from dayplan.template.task_item import get_task_item_template
from dayplan.time import DateKey, shift_date_key

logger = logging.getLogger(__name__)


class TaskValidationError(Exception):
    """Raised when a task operation is rejected before any state changes."""

    pass


class TaskMoveError(Exception):
    """Raised when a task could not be moved to another date."""

    pass


def get_task(session: PlannerSession, index: int) -> TaskItem:
    todos = session.record["todos"]
    if not 0 <= index < len(todos):
        raise IndexError(f"No task at index {index}, the day has {len(todos)} tasks")
    return todos[index]


def _new_task(session: PlannerSession, text: str) -> TaskItem:
    return get_task_item_template(
        text, issue_task_id=session.issue_task_id, now=session.now
    )


async def create_task(session: PlannerSession, text: str) -> Optional[TaskItem]:
    """Append a new task to the open day. Blank text is ignored."""
    text = text.strip()
    if not text:
        return None

    task = _new_task(session, text)
    session.record["todos"].append(task)
    await session.save()
    return task


async def toggle_completed(session: PlannerSession, index: int) -> TaskItem:
    task = get_task(session, index)
    task["completed"] = not task["completed"]
    await session.save()
    return task


async def edit_task(
    session: PlannerSession, index: int, new_text: str, new_notes: str
) -> TaskItem:
    task = get_task(session, index)
    text = new_text.strip()
    if not text:
        raise TaskValidationError("Task text cannot be empty")

    task["text"] = text
    task["notes"] = new_notes.strip()
    await session.save()
    return task


async def delete_task(session: PlannerSession, index: int) -> TaskItem:
    get_task(session, index)
    task = session.record["todos"].pop(index)
    _remap_selection_after_removal(session, index)
    await session.save()
    return task


def select_task(session: PlannerSession, index: int) -> Optional[int]:
    """Toggle the focus selection on a task; selecting it again clears it."""
    get_task(session, index)
    session.selection = None if session.selection == index else index
    return session.selection


def _remap_selection_after_removal(session: PlannerSession, index: int) -> None:
    if session.selection is None:
        return
    if session.selection == index:
        session.selection = None
    elif session.selection > index:
        session.selection -= 1


async def _load_for_move(session: PlannerSession, date_key: DateKey) -> DayRecord:
    if date_key == session.current_date:
        return session.record
    try:
        return await session.store.load_record(date_key)
    except StorageError as e:
        raise TaskMoveError(f"Could not load {date_key}: {e}") from e


def find_task(record: DayRecord, task_id: TaskId) -> Optional[int]:
    for index, task in enumerate(record["todos"]):
        if task["id"] == task_id:
            return index
    return None


async def move_to_date(
    session: PlannerSession, task_id: TaskId, from_date: DateKey, to_date: DateKey
) -> TaskItem:
    """
    Move a task to another date, resetting its completion.

    The task is appended to the target and that save must succeed before it is
    removed from the source, so a failure can leave a duplicate but never
    loses the task.
    """
    if from_date == to_date:
        raise TaskValidationError("A task can only be moved to a different date")

    source = await _load_for_move(session, from_date)
    source_index = find_task(source, task_id)
    if source_index is None:
        raise TaskMoveError(f"Task {task_id} does not exist on {from_date}")

    target = await _load_for_move(session, to_date)
    moved_task = deepcopy(source["todos"][source_index])
    moved_task["completed"] = False
    moved_task["move_to_next_day"] = False

    target["todos"].append(moved_task)
    try:
        await session.save(target)
    except StorageError as e:
        target["todos"].pop()
        raise TaskMoveError(f"Could not save {to_date}: {e}") from e

    source_index = find_task(source, task_id)
    if source_index is not None:
        source["todos"].pop(source_index)
        if source is session.record:
            _remap_selection_after_removal(session, source_index)
    try:
        await session.save(source)
    except StorageError as e:
        logger.error("Task %s is now on both %s and %s", task_id, from_date, to_date)
        raise TaskMoveError(f"Could not save {from_date}: {e}") from e

    logger.info("Moved task %s from %s to %s", task_id, from_date, to_date)
    return moved_task


async def move_to_next_day(session: PlannerSession, index: int) -> TaskItem:
    task = get_task(session, index)
    return await move_to_date(
        session,
        task["id"],
        session.current_date,
        shift_date_key(session.current_date, 1),
    )


async def add_to_date(
    session: PlannerSession, date_key: DateKey, text: str
) -> Optional[TaskItem]:
    """Quick-add a task to any date, as from a calendar cell."""
    if date_key == session.current_date:
        return await create_task(session, text)

    text = text.strip()
    if not text:
        return None

    record = await session.store.load_record(date_key)
    task = _new_task(session, text)
    record["todos"].append(task)
    await session.save(record)
    return task
