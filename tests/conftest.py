# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from trip_planner.cli.bootstrap import create_initial_state
from trip_planner.core.state import AppState
from trip_planner.storage.prefs_store import PrefsStore
from trip_planner.tasks.task_models import Task
from trip_planner.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="trip-planner-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path / "data",
        prefs_name="trip_planning_prefs",
        tasks_key="tasks_json",
    )


@pytest.fixture()
def prefs(tmp_path: Path) -> PrefsStore:
    return PrefsStore(tmp_path, "trip_planning_prefs")


@pytest.fixture()
def store(prefs: PrefsStore) -> TaskStore:
    return TaskStore(prefs)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired by the real composition root.

    The JSON prefs file is real (under tmp_path) because its behavior is
    part of what we want to test.
    """
    return create_initial_state(settings=settings)


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        Task(id=1, title="Flight to Paris", category="Flight", date="10/06/2024", budget=320.0),
        Task(id=2, title="Book Hotel", category="Hotel", date="11/06/2024", budget=540.5, important=True),
        Task(id=3, title="Pack bags", category="Packing", date="09/06/2025", done=True, notes="adapter!"),
    ]
