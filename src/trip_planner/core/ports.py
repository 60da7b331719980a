# src/trip_planner/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task flows.

The flows depend on Protocols instead of concrete implementations,
so tests can swap the JSON store for an in-memory one.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-collection task storage (load everything, save everything)."""

    def load_all(self) -> list[Task]: ...
    def save_all(self, tasks: Iterable[Task] | None) -> None: ...


class Prompt(Protocol):
    """Connector-side input: show a prompt, return what the user typed."""

    def __call__(self, prompt: str) -> str: ...
