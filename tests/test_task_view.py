# tests/test_task_view.py

from __future__ import annotations

import pytest

from trip_planner.tasks.task_models import Task
from trip_planner.tasks.task_view import TaskListView


def _trip() -> list[Task]:
    return [
        Task(id=1, title="Flight to Paris", category="Flight", date="10/06/2023"),
        Task(id=2, title="Book Hotel", category="Hotel", date="11/06/2024"),
        Task(id=3, title="Pack bags", category="Packing", date="09/06/2024"),
    ]


def test_filter_matches_category_case_insensitive() -> None:
    view = TaskListView(_trip())
    view.filter("hotel")
    assert [t.id for t in view] == [2]

    view.filter("  HOTEL ")
    assert [t.id for t in view] == [2]


def test_filter_matches_date_regardless_of_title() -> None:
    view = TaskListView(_trip())
    view.filter("2024")
    assert [t.id for t in view] == [2, 3]


def test_filter_keeps_full_order_and_widens_again() -> None:
    view = TaskListView(_trip())
    view.filter("pa")  # "Paris", "Packing"/"Pack"
    assert [t.id for t in view] == [1, 3]

    view.filter("pack")
    assert [t.id for t in view] == [3]

    view.filter("")
    assert view.displayed_tasks() == view.full_tasks()
    assert [t.id for t in view] == [1, 2, 3]


def test_filter_none_and_no_match() -> None:
    view = TaskListView(_trip())
    view.filter("zzz")
    assert view.count() == 0
    view.filter(None)
    assert view.count() == 3


def test_displayed_items_are_full_items() -> None:
    tasks = _trip()
    view = TaskListView(tasks)
    view.filter("book")
    shown = view.item_at(0)
    assert any(shown is t for t in view.full_tasks())


def test_replace_copies_input_and_resets_filter() -> None:
    view = TaskListView(_trip())
    view.filter("hotel")

    fresh = [Task(id=10, title="Museum pass", category="Other", date="01/07/2024")]
    view.replace(fresh)
    fresh.append(Task(id=11))

    assert view.query == ""
    assert [t.id for t in view] == [10]
    assert len(view.full_tasks()) == 1

    view.replace(None)
    assert view.count() == 0


def test_refresh_reapplies_query() -> None:
    view = TaskListView(_trip())
    view.filter("hotel")

    view.refresh(_trip() + [Task(id=4, title="Hotel in Rome", category="Hotel", date="12/06/2024")])

    assert view.query == "hotel"
    assert [t.id for t in view] == [2, 4]


def test_item_at_out_of_range() -> None:
    view = TaskListView(_trip())
    view.filter("hotel")
    assert view.item_at(0).id == 2
    with pytest.raises(IndexError):
        view.item_at(1)
    with pytest.raises(IndexError):
        view.item_at(-1)


def test_change_listener_called_once_per_operation() -> None:
    calls: list[int] = []
    view = TaskListView(on_change=lambda v: calls.append(v.count()))

    view.replace(_trip())
    view.filter("2024")
    view.refresh(_trip())

    assert calls == [3, 2, 2]
