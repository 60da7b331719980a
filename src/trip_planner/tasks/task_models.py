# src/trip_planner/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskCategory(StrEnum):
    """
    Category groups shown in the UI.

    Notes:
    - the stored category string is kept verbatim;
      anything that is not one of these values is grouped as OTHER.
    """

    FLIGHT = "Flight"
    HOTEL = "Hotel"
    PACKING = "Packing"
    OTHER = "Other"

    @classmethod
    def from_raw(cls, raw: str | None) -> TaskCategory:
        if not raw:
            return cls.OTHER
        try:
            return cls(raw)
        except ValueError:
            return cls.OTHER


@dataclass(slots=True)
class Task:
    """
    A single trip-planning record.

    Task() is the zero value used by the decoder; the creation flow passes every field.
    """

    id: int = 0
    title: str = ""
    category: str = ""
    date: str = ""  # dd/MM/yyyy
    budget: float = 0.0
    important: bool = False
    done: bool = False
    notes: str = ""

    @property
    def category_group(self) -> TaskCategory:
        return TaskCategory.from_raw(self.category)


# Everything an edit may change (id is system-assigned).
EDITABLE_FIELDS: tuple[str, ...] = (
    "title",
    "category",
    "date",
    "budget",
    "important",
    "done",
    "notes",
)
