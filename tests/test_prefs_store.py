# tests/test_prefs_store.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from trip_planner.storage.prefs_store import PrefsStore


def test_missing_file_reads_default(tmp_path: Path) -> None:
    prefs = PrefsStore(tmp_path, "p")
    assert prefs.path == tmp_path / "p.json"
    assert prefs.get_string("k") is None
    assert prefs.get_string("k", "fallback") == "fallback"
    assert not prefs.contains("k")


def test_put_keeps_other_keys(tmp_path: Path) -> None:
    prefs = PrefsStore(tmp_path, "p")
    prefs.put_string("a", "1")
    prefs.put_string("b", "2")
    prefs.put_string("a", "3")

    assert prefs.get_string("a") == "3"
    assert prefs.get_string("b") == "2"
    assert json.loads(prefs.path.read_text("utf-8")) == {"a": "3", "b": "2"}

    # a second instance over the same file sees the writes
    assert PrefsStore(tmp_path, "p").get_string("a") == "3"


def test_corrupted_file_reads_empty_and_is_overwritten(tmp_path: Path) -> None:
    path = tmp_path / "p.json"
    path.write_text("{not json", "utf-8")
    prefs = PrefsStore(tmp_path, "p")

    assert prefs.get_string("a") is None

    prefs.put_string("a", "x")
    assert prefs.get_string("a") == "x"


def test_non_object_file_reads_empty(tmp_path: Path) -> None:
    (tmp_path / "p.json").write_text("[1, 2, 3]", "utf-8")
    assert PrefsStore(tmp_path, "p").get_string("a") is None


def test_invalid_utf8_file_reads_empty(tmp_path: Path) -> None:
    (tmp_path / "p.json").write_bytes(b'{"tasks_json": "\xff\xfe[]"}')
    prefs = PrefsStore(tmp_path, "p")

    assert prefs.get_string("tasks_json") is None
    assert not prefs.contains("tasks_json")

    prefs.put_string("a", "x")
    assert prefs.get_string("a") == "x"


def test_non_string_values_survive_writes(tmp_path: Path) -> None:
    path = tmp_path / "p.json"
    path.write_text(json.dumps({"launches": 3, "flags": {"dark": True}, "a": "1"}), "utf-8")
    prefs = PrefsStore(tmp_path, "p")

    # non-string slots read as missing but stay in the file
    assert prefs.get_string("launches") is None
    assert prefs.get_string("launches", "0") == "0"
    assert prefs.contains("launches")

    prefs.put_string("a", "2")
    prefs.remove("missing")

    assert json.loads(path.read_text("utf-8")) == {"launches": 3, "flags": {"dark": True}, "a": "2"}


def test_remove_and_clear(tmp_path: Path) -> None:
    prefs = PrefsStore(tmp_path, "p")
    prefs.put_string("a", "1")
    prefs.put_string("b", "2")

    prefs.remove("a")
    prefs.remove("missing")
    assert not prefs.contains("a")
    assert prefs.contains("b")

    prefs.clear()
    assert prefs.get_string("b") is None


def test_name_is_required(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        PrefsStore(tmp_path, "  ")
