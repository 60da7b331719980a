# src/trip_planner/tasks/task_view.py

"""
Full/filtered list pair backing the task list screen.

`full` is the authoritative collection as last loaded, `displayed` is the
projection produced by the last filter. Filtering always starts from `full`,
so narrowing and widening the query never needs any history.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from .task_models import Task

logger = logging.getLogger(__name__)

ChangeListener = Callable[["TaskListView"], None]


def normalize_query(query: str | None) -> str:
    return (query or "").strip().lower()


def task_matches(task: Task, needle: str) -> bool:
    """Case-insensitive substring match on title, category or date (needle already normalized)."""
    return (
        needle in task.title.lower()
        or needle in task.category.lower()
        or needle in task.date.lower()
    )


class TaskListView:
    def __init__(
        self,
        tasks: Iterable[Task] | None = None,
        *,
        on_change: ChangeListener | None = None,
    ) -> None:
        self._full: list[Task] = list(tasks or [])
        self._displayed: list[Task] = list(self._full)
        self._query: str = ""
        self._on_change = on_change

    @property
    def query(self) -> str:
        return self._query

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self)

    # ---- mutation ----

    def replace(self, new_full: Iterable[Task] | None) -> None:
        self._full = list(new_full or [])
        self._displayed = list(self._full)
        self._query = ""
        self._notify()

    def filter(self, query: str | None) -> None:
        needle = normalize_query(query)
        if not needle:
            self._displayed = list(self._full)
        else:
            self._displayed = [t for t in self._full if task_matches(t, needle)]
        self._query = query or ""
        logger.debug("Filter %r: %d of %d tasks", needle, len(self._displayed), len(self._full))
        self._notify()

    def refresh(self, new_full: Iterable[Task] | None) -> None:
        """Reload after returning to the list: new data, same query."""
        query = self._query
        self._full = list(new_full or [])
        self.filter(query)

    # ---- queries ----

    def item_at(self, index: int) -> Task:
        if index < 0 or index >= len(self._displayed):
            raise IndexError(f"task index {index} out of range (0..{len(self._displayed) - 1})")
        return self._displayed[index]

    def count(self) -> int:
        return len(self._displayed)

    def full_tasks(self) -> list[Task]:
        return list(self._full)

    def displayed_tasks(self) -> list[Task]:
        return list(self._displayed)

    def __len__(self) -> int:
        return len(self._displayed)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._displayed))
