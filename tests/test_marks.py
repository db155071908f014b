from __future__ import annotations

from pathlib import Path

import pytest

from hpoon import marks
from hpoon.codec import encode_line
from hpoon.exceptions import InvalidMarkName, MarkNotFound
from hpoon.store import MarkStore


@pytest.fixture()
def store(tmp_path: Path) -> MarkStore:
    return MarkStore(tmp_path / "hpoon")


def test_set_then_get_last_mark(store):
    marks.set_mark("/tmp/foo", store=store)
    assert marks.get_mark(store=store) == "/tmp/foo"
    assert marks.list_marks(store=store) == []


def test_named_mark_updates_last_mark_too(store):
    marks.set_mark("/tmp/foo", "myfile", store=store)
    assert marks.get_mark("myfile", store=store) == "/tmp/foo"
    assert marks.get_mark(store=store) == "/tmp/foo"
    assert marks.list_marks(store=store) == [("myfile", "/tmp/foo")]


def test_unnamed_mark_keeps_existing_named_marks(store):
    marks.set_mark("/tmp/foo", "myfile", store=store)
    marks.set_mark("/tmp/bar", store=store)
    assert marks.get_mark(store=store) == "/tmp/bar"
    assert marks.get_mark("myfile", store=store) == "/tmp/foo"


def test_get_mark_without_any_mark_returns_empty(store):
    assert marks.get_mark(store=store) == ""


def test_get_mark_missing_name_raises(store):
    marks.clean_marks(store=store)
    with pytest.raises(MarkNotFound, match="nope"):
        marks.get_mark("nope", store=store)


def test_stale_paths_are_still_returned(store, tmp_path):
    target = tmp_path / "doomed.txt"
    target.write_text("x")
    marks.set_mark(str(target), "doomed", store=store)
    target.unlink()
    assert marks.get_mark("doomed", store=store) == str(target)


def test_list_marks_sorted_by_name(store):
    for name in ("zeta", "alpha", "mid"):
        marks.set_mark(f"/tmp/{name}", name, store=store)
    assert [name for name, _ in marks.list_marks(store=store)] == ["alpha", "mid", "zeta"]


def test_clean_marks_resets_state(store):
    marks.set_mark("/tmp/foo", "myfile", store=store)
    marks.clean_marks(store=store)
    assert marks.get_mark(store=store) == ""
    assert marks.list_marks(store=store) == []


def test_corrupt_line_does_not_hide_other_marks(store):
    store.path.write_text("broken line\n" + encode_line("ok", "/tmp/ok") + "\n", encoding="utf-8")
    assert marks.get_mark("ok", store=store) == "/tmp/ok"


@pytest.mark.parametrize("name", ["_", "", "a/b", "two\nlines"])
def test_set_mark_rejects_unusable_names(store, name):
    with pytest.raises(InvalidMarkName):
        marks.set_mark("/tmp/foo", name, store=store)
    assert not store.path.exists()


def test_operations_default_to_configured_store(monkeypatch, store):
    monkeypatch.setattr(marks, "build_store", lambda: store)
    marks.set_mark("/tmp/foo", "x")
    assert marks.get_mark("x") == "/tmp/foo"
    assert store.path.exists()
