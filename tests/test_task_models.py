# tests/test_task_models.py

from __future__ import annotations

from trip_planner.tasks.task_models import EDITABLE_FIELDS, Task, TaskCategory


def test_default_task_is_zero_value() -> None:
    t = Task()
    assert (t.id, t.title, t.category, t.date) == (0, "", "", "")
    assert t.budget == 0.0
    assert t.important is False
    assert t.done is False
    assert t.notes == ""


def test_category_group_keeps_stored_value() -> None:
    assert Task(category="Hotel").category_group is TaskCategory.HOTEL
    t = Task(category="Cruise")
    assert t.category_group is TaskCategory.OTHER
    assert t.category == "Cruise"


def test_category_from_raw_fallbacks() -> None:
    assert TaskCategory.from_raw(None) is TaskCategory.OTHER
    assert TaskCategory.from_raw("") is TaskCategory.OTHER
    # exact stored spelling only; the forms layer normalizes user input
    assert TaskCategory.from_raw("flight") is TaskCategory.OTHER
    assert TaskCategory.from_raw("Flight") is TaskCategory.FLIGHT


def test_id_is_not_editable() -> None:
    assert "id" not in EDITABLE_FIELDS
    assert set(EDITABLE_FIELDS) == {"title", "category", "date", "budget", "important", "done", "notes"}
