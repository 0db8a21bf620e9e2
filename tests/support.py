import itertools
from copy import deepcopy
from typing import Callable, Optional

import pendulum

from dayplan.model.day_record import DayRecord
from dayplan.model.entity_id import TaskId
from dayplan.model.task_item import TaskItem
from dayplan.repository.day_record import StorageError
from dayplan.service.session import PlannerSession
from dayplan.template.day_record import get_day_record_template
from dayplan.time import DateKey

FIXED_NOW = pendulum.datetime(2024, 3, 15, 9, 0, tz="UTC")
CURRENT_DATE = "2024-03-15"


class InMemoryRecordStore:
    """Record store kept in a dict, with per-date failure injection."""

    def __init__(self) -> None:
        self.records: dict[DateKey, DayRecord] = {}
        self.loads: list[DateKey] = []
        self.saves: list[DayRecord] = []
        self.failing_loads: set[DateKey] = set()
        self.failing_saves: set[DateKey] = set()

    async def load_record(self, date_key: DateKey) -> DayRecord:
        self.loads.append(date_key)
        if date_key in self.failing_loads:
            raise StorageError(f"load of {date_key} failed")
        if date_key in self.records:
            return deepcopy(self.records[date_key])
        return get_day_record_template(date_key)

    async def save_record(self, record: DayRecord) -> None:
        if record["date"] in self.failing_saves:
            raise StorageError(f"save of {record['date']} failed")
        self.records[record["date"]] = deepcopy(record)
        self.saves.append(deepcopy(record))

    def saved_dates(self) -> list[DateKey]:
        return [record["date"] for record in self.saves]

    def put(self, date_key: DateKey, texts: list[str], notes: str = "") -> DayRecord:
        record = get_day_record_template(date_key)
        record["notes"] = notes
        record["todos"] = [make_task(text, f"{date_key}-{i}") for i, text in enumerate(texts)]
        self.records[date_key] = deepcopy(record)
        return record


def make_task(text: str, task_id: TaskId, completed: bool = False) -> TaskItem:
    return {
        "id": task_id,
        "text": text,
        "completed": completed,
        "notes": "",
        "created_at": FIXED_NOW,
        "move_to_next_day": False,
    }


def sequential_ids() -> Callable[[], TaskId]:
    counter = itertools.count(1)
    return lambda: f"task-{next(counter)}"


def make_session(
    store: InMemoryRecordStore,
    current_date: Optional[DateKey] = CURRENT_DATE,
    notes_debounce_ms: int = 20,
    week_start: str = "sunday",
) -> PlannerSession:
    return PlannerSession(
        store,
        current_date=current_date,
        week_start=week_start,  # type: ignore[arg-type]
        notes_debounce_ms=notes_debounce_ms,
        issue_task_id=sequential_ids(),
        now=lambda: FIXED_NOW,
    )


def task_texts(record: DayRecord) -> list[str]:
    return [task["text"] for task in record["todos"]]
