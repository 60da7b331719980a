# src/trip_planner/tasks/task_ids.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.ports import TaskRepo
from .task_models import Task

logger = logging.getLogger(__name__)


def max_id(tasks: Iterable[Task]) -> int:
    return max((t.id for t in tasks), default=0)


def next_id(store: TaskRepo) -> int:
    """
    Return an id not used by any persisted task: max(id) + 1, or 1 when empty.

    Not safe for concurrent callers; the app has a single foreground caller.
    """
    nid = max_id(store.load_all()) + 1
    logger.debug("Allocated task id=%s", nid)
    return nid
