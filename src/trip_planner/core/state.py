# src/trip_planner/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_store import TaskStore
from ..tasks.task_view import TaskListView


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskStore

    # The list screen's own view over data it loads explicitly (never process-global).
    view: TaskListView = field(default_factory=TaskListView)
