# src/trip_planner/tasks/task_forms.py

"""
Parsing and validation of user-entered task fields.

This is the input side of the create/edit screens: everything that reaches
task_api has already passed through here. Failures raise ValidationError with
a message meant for the user.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from datetime import date as _date
from typing import Any

from ..errors import ValidationError
from .task_models import EDITABLE_FIELDS, TaskCategory

DATE_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")

_TRUE = {"1", "true", "yes", "y", "on", "x"}
_FALSE = {"0", "false", "no", "n", "off", ""}


def validate_title(text: str | None) -> str:
    title = (text or "").strip()
    if not title:
        raise ValidationError("Title is required")
    return title


def parse_budget(text: str | None) -> float:
    raw = (text or "").strip()
    if not raw:
        return 0.0
    try:
        value = float(raw)
    except ValueError:
        raise ValidationError("Invalid budget") from None
    if math.isnan(value) or math.isinf(value) or value < 0:
        raise ValidationError("Invalid budget")
    return value


def format_date(day: int, month: int, year: int) -> str:
    """Date-picker output format: dd/MM/yyyy."""
    return f"{day:02d}/{month:02d}/{year:04d}"


def parse_date(text: str | None) -> str:
    raw = (text or "").strip()
    if not raw:
        raise ValidationError("Please select a date")
    m = DATE_RE.match(raw)
    if not m:
        raise ValidationError(f"Invalid date {raw!r}; expected dd/MM/yyyy")
    day, month, year = (int(g) for g in m.groups())
    try:
        _date(year, month, day)
    except ValueError:
        raise ValidationError(f"Invalid date {raw!r}") from None
    return format_date(day, month, year)


def parse_category(text: str | None) -> str:
    raw = (text or "").strip()
    if not raw:
        return TaskCategory.OTHER.value
    for cat in TaskCategory:
        if cat.value.lower() == raw.lower():
            return cat.value
    choices = ", ".join(c.value for c in TaskCategory)
    raise ValidationError(f"Unknown category {raw!r}; choose one of: {choices}")


def parse_flag(text: str | None) -> bool:
    raw = (text or "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValidationError(f"Expected yes/no, got {text!r}")


_PARSERS = {
    "title": validate_title,
    "category": parse_category,
    "date": parse_date,
    "budget": parse_budget,
    "important": parse_flag,
    "done": parse_flag,
    "notes": lambda s: (s or "").strip(),
}


def parse_changes(values: Mapping[str, str]) -> dict[str, Any]:
    """
    Parse only the fields present in `values` (edit form).

    Unknown field names are a user error here, not a programming error.
    """
    out: dict[str, Any] = {}
    for key, raw in values.items():
        name = key.strip().lower()
        parser = _PARSERS.get(name)
        if parser is None:
            allowed = ", ".join(EDITABLE_FIELDS)
            raise ValidationError(f"Unknown field {key!r}; editable fields: {allowed}")
        out[name] = parser(raw)
    return out


@dataclass(slots=True)
class TaskForm:
    """Validated creation field set (everything but the id)."""

    title: str
    category: str
    date: str
    budget: float = 0.0
    important: bool = False
    done: bool = False
    notes: str = ""

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> TaskForm:
        parsed = parse_changes(values)
        if "title" not in parsed:
            raise ValidationError("Title is required")
        if "date" not in parsed:
            raise ValidationError("Please select a date")
        parsed.setdefault("category", TaskCategory.OTHER.value)
        return cls(**parsed)

    def as_fields(self) -> dict[str, Any]:
        return asdict(self)
