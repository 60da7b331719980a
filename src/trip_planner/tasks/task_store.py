# src/trip_planner/tasks/task_store.py

from __future__ import annotations

import json
import logging
import math
from collections.abc import Iterable
from typing import Any

from ..errors import StorageDecodeError
from ..storage.prefs_store import PrefsStore
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_KEY = "tasks_json"


# ---- codec ----


# Coercions follow the lenient rules of the JSON layer the stored data was
# written with: numeric strings for numbers, any scalar for strings,
# "true"/"false" strings for flags. Objects, arrays and non-numeric strings
# in number fields are still rejected.


def _number_from_str(name: str, value: str) -> float:
    try:
        number = float(value.strip())
    except ValueError:
        raise StorageDecodeError(f"field {name!r}: expected number, got {value!r}") from None
    if math.isnan(number) or math.isinf(number):
        raise StorageDecodeError(f"field {name!r}: expected finite number, got {value!r}")
    return number


def _as_int(name: str, value: Any) -> int:
    if value is None:
        return 0
    # bool is an int subclass; never a valid id.
    if isinstance(value, bool):
        raise StorageDecodeError(f"field {name!r}: expected integer, got boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = _number_from_str(name, value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise StorageDecodeError(f"field {name!r}: expected integer, got {value!r}")


def _as_float(name: str, value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise StorageDecodeError(f"field {name!r}: expected number, got boolean")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return _number_from_str(name, value)
    raise StorageDecodeError(f"field {name!r}: expected number, got {type(value).__name__}")


def _as_bool(name: str, value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    raise StorageDecodeError(f"field {name!r}: expected boolean, got {type(value).__name__}")


def _as_str(name: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise StorageDecodeError(f"field {name!r}: expected string, got {type(value).__name__}")


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "category": task.category,
        "date": task.date,
        "budget": task.budget,
        "important": task.important,
        "done": task.done,
        "notes": task.notes,
    }


def task_from_dict(raw: Any) -> Task:
    """
    Decode one array element.

    Missing keys and nulls take the type default, unknown keys are ignored,
    scalars are coerced leniently, anything else raises StorageDecodeError.
    """
    if not isinstance(raw, dict):
        raise StorageDecodeError(f"task entry must be an object, got {type(raw).__name__}")
    return Task(
        id=_as_int("id", raw.get("id")),
        title=_as_str("title", raw.get("title")),
        category=_as_str("category", raw.get("category")),
        date=_as_str("date", raw.get("date")),
        budget=_as_float("budget", raw.get("budget")),
        important=_as_bool("important", raw.get("important")),
        done=_as_bool("done", raw.get("done")),
        notes=_as_str("notes", raw.get("notes")),
    )


def encode_tasks(tasks: Iterable[Task] | None) -> str:
    return json.dumps([task_to_dict(t) for t in (tasks or [])], ensure_ascii=False)


def decode_tasks(blob: str | None) -> list[Task]:
    """Decode a persisted blob. Empty input decodes to []; anything malformed raises."""
    if blob is None or not blob.strip():
        return []
    try:
        data = json.loads(blob)
    except (ValueError, RecursionError) as e:
        raise StorageDecodeError(f"invalid JSON: {type(e).__name__}") from e
    if data is None:
        return []
    if not isinstance(data, list):
        raise StorageDecodeError(f"expected a JSON array, got {type(data).__name__}")
    return [task_from_dict(item) for item in data]


# ---- store ----


class TaskStore:
    """
    Task collection persisted as one JSON array under a fixed prefs key.

    The whole collection is read and written at once:
    - load_all never raises on bad data (degrades to an empty list)
    - save_all replaces the previous value

    Read-modify-write sequences are not atomic; one caller at a time is assumed.
    """

    def __init__(self, prefs: PrefsStore, key: str = DEFAULT_TASKS_KEY) -> None:
        if not key or not key.strip():
            raise ValueError("tasks key is required")
        self._prefs = prefs
        self._key = key
        logger.info("TaskStore ready prefs=%s key=%s total=%s", prefs.path, key, self.count())

    @property
    def key(self) -> str:
        return self._key

    @property
    def prefs(self) -> PrefsStore:
        return self._prefs

    def load_all(self) -> list[Task]:
        blob = self._prefs.get_string(self._key)
        try:
            tasks = decode_tasks(blob)
        except StorageDecodeError as e:
            logger.warning("Stored tasks under %s could not be decoded (%s); using an empty list.", self._key, e)
            return []
        logger.debug("Loaded %d tasks from %s", len(tasks), self._key)
        return tasks

    def save_all(self, tasks: Iterable[Task] | None) -> None:
        items = list(tasks or [])
        self._prefs.put_string(self._key, encode_tasks(items))
        logger.debug("Saved %d tasks to %s", len(items), self._key)

    def count(self) -> int:
        return len(self.load_all())
