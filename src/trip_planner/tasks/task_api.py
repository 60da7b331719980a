# src/trip_planner/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ..core.ports import TaskRepo
from .task_forms import TaskForm
from .task_ids import next_id
from .task_models import EDITABLE_FIELDS, Task
from .task_view import TaskListView

logger = logging.getLogger(__name__)


def find_task(tasks: Iterable[Task], task_id: int) -> Task | None:
    """Return the task with this id, or None (not-found sentinel)."""
    for t in tasks:
        if t.id == task_id:
            return t
    return None


def create_task(store: TaskRepo, form: TaskForm) -> Task:
    """
    Allocate an id, build the task and append it to the persisted collection.
    Input is expected to be validated already (see task_forms).
    """
    task = Task(id=next_id(store), **form.as_fields())
    tasks = store.load_all()
    tasks.append(task)
    store.save_all(tasks)
    logger.info("Task created id=%s category=%s date=%s", task.id, task.category, task.date)
    return task


def update_task(store: TaskRepo, task_id: int, **changes: Any) -> Task | None:
    """
    Set the given fields on the stored task in place and save.

    Returns the updated task, or None if no task has this id (nothing is saved then).
    """
    unknown = set(changes) - set(EDITABLE_FIELDS)
    if unknown:
        raise ValueError(f"not editable: {', '.join(sorted(unknown))}")

    tasks = store.load_all()
    task = find_task(tasks, task_id)
    if task is None:
        logger.debug("update_task: id=%s not found", task_id)
        return None

    for name, value in changes.items():
        setattr(task, name, value)
    store.save_all(tasks)
    logger.info("Task updated id=%s fields=%s", task_id, ",".join(sorted(changes)) or "-")
    return task


def delete_task(store: TaskRepo, task_id: int) -> Task | None:
    """Remove the task with this id and save. Returns the removed task or None."""
    tasks = store.load_all()
    task = find_task(tasks, task_id)
    if task is None:
        logger.debug("delete_task: id=%s not found", task_id)
        return None
    tasks.remove(task)
    store.save_all(tasks)
    logger.info("Task deleted id=%s", task_id)
    return task


def delete_task_at(store: TaskRepo, view: TaskListView, index: int) -> Task | None:
    """
    Delete the task shown at `index` of the (possibly filtered) view.

    The position is resolved through the view and the delete goes by id,
    so a filtered list never removes the wrong task. The view is reloaded afterwards.
    """
    target = view.item_at(index)
    removed = delete_task(store, target.id)
    view.refresh(store.load_all())
    return removed


def search_tasks(store: TaskRepo, view: TaskListView, query: str | None) -> list[Task]:
    """Reload the view from storage, apply `query`, return the projection."""
    view.replace(store.load_all())
    view.filter(query)
    return view.displayed_tasks()
