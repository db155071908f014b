"""Persistence layer for the shared mark record."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from hpoon.codec import LAST_MARKED_KEY, decode_line, encode_line
from hpoon.exceptions import CorruptLine, StoreUnreadable, StoreWriteError
from hpoon.paths import resolve_store_path
from hpoon.settings import Settings

LOGGER = logging.getLogger(__name__)


@dataclass
class MarkRecord:
    """Everything hpoon remembers: the last unnamed mark plus named marks."""

    last_marked: str = ""
    marks: Dict[str, str] = field(default_factory=dict)


class MarkStore:
    """Load and save the whole ``MarkRecord`` from one text file.

    There is no locking and no atomic replace: ``save`` truncates and rewrites
    the file in place, so concurrent invocations race and the last writer wins.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path if path is not None else resolve_store_path()

    def load(self) -> MarkRecord:
        """Read the record, creating an empty store file on first use.

        Lines that fail to decode are logged and skipped so one corrupt entry
        never hides the others.
        """

        try:
            if not self.path.exists():
                self.path.touch()
            handle = self.path.open("r", encoding="utf-8", errors="replace", newline="\n")
        except OSError as exc:
            raise StoreUnreadable(self.path, exc.strerror or str(exc)) from exc

        record = MarkRecord()
        with handle:
            try:
                for lineno, line in enumerate(handle, start=1):
                    line = line.rstrip("\r\n")
                    try:
                        key, path = decode_line(line)
                    except CorruptLine as exc:
                        LOGGER.warning("Failed to read hpoon marks file %s (line %s): %s", self.path, lineno, exc)
                        continue
                    if key == LAST_MARKED_KEY:
                        record.last_marked = path
                    else:
                        record.marks[key] = path
            except OSError as exc:
                raise StoreUnreadable(self.path, exc.strerror or str(exc)) from exc
        LOGGER.debug("Loaded %s named marks from %s", len(record.marks), self.path)
        return record

    def save(self, record: MarkRecord) -> None:
        """Overwrite the store file with ``record``.

        When ``last_marked`` is empty the file is truncated and nothing is
        written, which drops the named marks as well.
        """

        try:
            with self.path.open("w", encoding="utf-8", newline="\n") as handle:
                if not record.last_marked:
                    LOGGER.debug("No last mark to persist; leaving %s empty", self.path)
                    return
                handle.write(encode_line(LAST_MARKED_KEY, record.last_marked) + "\n")
                for name, path in record.marks.items():
                    if not path:
                        continue
                    handle.write(encode_line(name, path) + "\n")
        except OSError as exc:
            raise StoreWriteError(self.path, exc.strerror or str(exc)) from exc
        LOGGER.debug("Saved %s named marks to %s", len(record.marks), self.path)

    def clean(self) -> None:
        """Remove the store file; a store that was never written is already clean."""

        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            raise StoreWriteError(self.path, exc.strerror or str(exc)) from exc
        LOGGER.debug("Removed %s", self.path)


def build_store(settings: Optional[Settings] = None) -> MarkStore:
    """Return the store bound to ``settings`` (or the OS default location)."""

    if settings is None:
        return MarkStore()
    return MarkStore(settings.store_path)
