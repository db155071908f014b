"""Mark operations: each call loads the record, optionally mutates it, and saves it."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from hpoon.codec import LAST_MARKED_KEY, SEPARATOR
from hpoon.exceptions import InvalidMarkName, MarkNotFound
from hpoon.store import MarkStore, build_store

LOGGER = logging.getLogger(__name__)


def validate_mark_name(name: str) -> None:
    """Reject names the store file could not hold unambiguously."""

    if not name:
        raise InvalidMarkName(name, "name must not be empty")
    if name == LAST_MARKED_KEY:
        raise InvalidMarkName(name, f"{LAST_MARKED_KEY!r} is reserved for the last unnamed mark")
    if SEPARATOR in name or "\n" in name or "\r" in name:
        raise InvalidMarkName(name, f"name must not contain {SEPARATOR!r} or line breaks")


def set_mark(path: str, name: Optional[str] = None, *, store: Optional[MarkStore] = None) -> None:
    """Remember ``path`` as the last mark, and under ``name`` when one is given.

    The path is not checked for existence here.
    """

    if name is not None:
        validate_mark_name(name)
    active_store = store or build_store()
    record = active_store.load()
    record.last_marked = path
    if name is not None:
        record.marks[name] = path
    active_store.save(record)
    LOGGER.debug("Marked %s as %s", path, name or LAST_MARKED_KEY)


def get_mark(name: Optional[str] = None, *, store: Optional[MarkStore] = None) -> str:
    """Return the named mark, or the last mark (``""`` when unset) without a name."""

    record = (store or build_store()).load()
    if name is None:
        return record.last_marked
    try:
        return record.marks[name]
    except KeyError:
        raise MarkNotFound(name) from None


def list_marks(*, store: Optional[MarkStore] = None) -> List[Tuple[str, str]]:
    """Return every named mark as ``(name, path)`` sorted by name."""

    record = (store or build_store()).load()
    return sorted(record.marks.items())


def clean_marks(*, store: Optional[MarkStore] = None) -> None:
    """Forget every mark."""

    (store or build_store()).clean()
