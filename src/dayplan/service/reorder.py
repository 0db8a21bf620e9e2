# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypeVar

from dayplan.service.session import PlannerSession

DropZone = Literal["top", "bottom"]

T = TypeVar("T")


def _adjust_for_removal(dragged_index: int, target: int) -> int:
    # Removing the dragged item first shifts every later index down by one
    if dragged_index < target:
        return target - 1
    return target


def compute_drop_index(dragged_index: int, target_index: int, drop_above: bool) -> int:
    """
    Resting index of an item dropped onto another row.

    Args:
        dragged_index: Current index of the dragged item
        target_index: Index of the row it was dropped on
        drop_above: True when the pointer was in the upper half of that row

    Returns:
        The index the item ends up at once it has been moved
    """
    if dragged_index == target_index:
        return dragged_index
    target = target_index if drop_above else target_index + 1
    return _adjust_for_removal(dragged_index, target)


def compute_zone_index(dragged_index: int, zone: DropZone, length: int) -> int:
    target = 0 if zone == "top" else length
    return _adjust_for_removal(dragged_index, target)


def remap_selection(
    selection: Optional[int], dragged_index: int, new_index: int
) -> Optional[int]:
    if selection is None:
        return None
    if selection == dragged_index:
        return new_index
    if dragged_index < selection <= new_index:
        return selection - 1
    if new_index <= selection < dragged_index:
        return selection + 1
    return selection


def move_item(items: list[T], dragged_index: int, new_index: int) -> None:
    item = items.pop(dragged_index)
    items.insert(new_index, item)


async def reorder_task(
    session: PlannerSession, dragged_index: int, new_index: int
) -> bool:
    """
    Move the task at dragged_index so it rests at new_index.

    Returns False without touching the record or saving when the position
    does not change.
    """
    todos = session.record["todos"]
    if not 0 <= dragged_index < len(todos):
        raise IndexError(f"No task at position {dragged_index}")
    if not 0 <= new_index < len(todos):
        raise IndexError(f"Cannot move a task to position {new_index}")
    if new_index == dragged_index:
        return False

    move_item(todos, dragged_index, new_index)
    session.selection = remap_selection(session.selection, dragged_index, new_index)
    await session.save()
    return True


async def drop_on_task(
    session: PlannerSession, dragged_index: int, target_index: int, drop_above: bool
) -> bool:
    new_index = compute_drop_index(dragged_index, target_index, drop_above)
    return await reorder_task(session, dragged_index, new_index)


async def drop_on_zone(
    session: PlannerSession, dragged_index: int, zone: DropZone
) -> bool:
    new_index = compute_zone_index(
        dragged_index, zone, len(session.record["todos"])
    )
    return await reorder_task(session, dragged_index, new_index)
