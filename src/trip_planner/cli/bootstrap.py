# src/trip_planner/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the prefs file, task store and list view into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..storage.prefs_store import PrefsStore
from ..tasks.task_store import TaskStore
from ..tasks.task_view import TaskListView

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    prefs = PrefsStore(settings.data_dir, settings.prefs_name)
    store = TaskStore(prefs, settings.tasks_key)

    state = AppState(
        settings=settings,
        task_store=store,
        view=TaskListView(store.load_all()),
    )
    logger.debug("State ready: %d tasks in view", state.view.count())
    return state
