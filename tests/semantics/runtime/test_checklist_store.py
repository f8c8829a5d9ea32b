"""
Semantic test: checklist file persistence.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from khatam_planner.core.progress.checklist import ChecklistState, toggle_day, toggle_slot
from khatam_planner.runtime.checklist_store import JsonChecklistStore


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    store = JsonChecklistStore(tmp_path / "missing.json")

    assert store.load() == ChecklistState()


def test_save_then_load(tmp_path: Path) -> None:
    store = JsonChecklistStore(tmp_path / "nested" / "checklist.json")
    state = toggle_slot(toggle_day(ChecklistState(), 4), 4, 17)

    store.save(state)

    assert json.loads(store.path.read_text(encoding="utf-8")) == {
        "completedDays": {"4": True},
        "completedSlots": {"4:17": True},
    }
    assert store.load() == state


def test_corrupt_file_loads_empty(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "checklist.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        state = JsonChecklistStore(path).load()

    assert state == ChecklistState()
    assert "Invalid checklist file" in caplog.text


def test_non_utf8_file_loads_empty(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "checklist.json"
    path.write_bytes(b"\xff\xfe{garbage")

    with caplog.at_level(logging.WARNING):
        state = JsonChecklistStore(path).load()

    assert state == ChecklistState()
    assert "Invalid checklist file" in caplog.text


def test_unreadable_path_loads_empty(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "checklist.json"
    path.mkdir()

    with caplog.at_level(logging.WARNING):
        state = JsonChecklistStore(path).load()

    assert state == ChecklistState()
    assert "Invalid checklist file" in caplog.text
