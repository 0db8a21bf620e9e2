# SPDX-License-Identifier: MIT

import asyncio
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, Protocol, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from dayplan import configuration, time
from dayplan.model.day_record import DayRecord
from dayplan.model.task_item import TaskItem
from dayplan.template.day_record import get_day_record_template
from dayplan.time import DateKey

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a day record cannot be read from or written to storage."""

    pass


class RecordStore(Protocol):
    async def load_record(self, date_key: DateKey) -> DayRecord: ...

    async def save_record(self, record: DayRecord) -> None: ...


class DayRecordRepository:
    """
    One YAML file per date under the days directory.

    There is no caching: every load reads the file and every save overwrites
    it with the complete record.
    """

    def __init__(self, days_dir: Optional[Path] = None) -> None:
        self._days_dir = days_dir

    @property
    def days_dir(self) -> Path:
        if self._days_dir is not None:
            return self._days_dir
        return configuration.DATA_DAYS_DIR

    def record_path(self, date_key: DateKey) -> Path:
        time.date_from_key(date_key)
        return self.days_dir / f"{date_key}.yaml"

    async def load_record(self, date_key: DateKey) -> DayRecord:
        path = self.record_path(date_key)
        return await asyncio.to_thread(self.__load_data, path, date_key)

    async def save_record(self, record: DayRecord) -> None:
        path = self.record_path(record["date"])
        serializable_record = self.__convert_record_for_serialization(
            deepcopy(record)
        )
        await asyncio.to_thread(self.__save_data, path, serializable_record)

    def __load_data(self, path: Path, date_key: DateKey) -> DayRecord:
        if not path.is_file():
            return get_day_record_template(date_key)
        try:
            raw_record = load(path.read_text(encoding="utf-8"), Loader=Loader)
        except (OSError, UnicodeDecodeError, YAMLError) as e:
            raise StorageError(f"Failed to read {path}: {e}") from e
        if raw_record is None:
            return get_day_record_template(date_key)
        if not isinstance(raw_record, dict) or not isinstance(
            raw_record.get("todos") or [], list
        ):
            raise StorageError(f"Malformed day record {path}: not a day mapping")
        try:
            return self.__convert_record_for_deserialization(raw_record, date_key)
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Malformed day record {path}: {e}") from e

    def __save_data(self, path: Path, serializable_record: dict[str, Any]) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                dump(serializable_record, Dumper=Dumper, sort_keys=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e
        logger.debug("Saved %s", path)

    def __convert_record_for_serialization(self, record: DayRecord) -> dict[str, Any]:
        serializable_record = cast(dict[str, Any], record)
        serializable_record["todos"] = [
            self.__convert_task_for_serialization(task) for task in record["todos"]
        ]
        return serializable_record

    def __convert_task_for_serialization(self, task: TaskItem) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        serializable_task["created_at"] = time.datetime_to_iso_str(
            serializable_task["created_at"]
        )
        return serializable_task

    def __convert_record_for_deserialization(
        self, record: dict[str, Any], date_key: DateKey
    ) -> DayRecord:
        todos = record.get("todos") or []
        notes = record.get("notes")
        return {
            "date": str(record.get("date") or date_key),
            "todos": [self.__convert_task_for_deserialization(task) for task in todos],
            "notes": str(notes) if notes is not None else "",
        }

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> TaskItem:
        created_at = task["created_at"]
        deserialized_task: TaskItem = {
            "id": str(task["id"]),
            "text": str(task["text"]),
            "completed": bool(task.get("completed", False)),
            # Records written before per-task notes existed have no notes key
            "notes": str(task.get("notes") or ""),
            "created_at": time.datetime_from_str(str(created_at)),
            "move_to_next_day": bool(task.get("move_to_next_day", False)),
        }
        return deserialized_task


DAY_RECORD_REPO = DayRecordRepository()
