"""
Shared exceptions for hpoon.

Exception Hierarchy:
    HpoonError (base)
    ├── CorruptLine (one store line could not be decoded; skipped on load)
    │   ├── MalformedLine
    │   └── LineDecodeError
    ├── SettingsError (a runtime setting has an unusable value)
    ├── StoreError (the store file itself is unusable)
    │   ├── StoreUnreadable
    │   └── StoreWriteError
    └── MarkError (a mark request cannot be satisfied)
        ├── MarkNotFound
        ├── InvalidMarkName
        └── PathNotFound
"""

from __future__ import annotations

from pathlib import Path


class HpoonError(Exception):
    """Base exception for all hpoon errors."""


class CorruptLine(HpoonError):
    """Base exception for store lines that cannot be turned back into a mark."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        super().__init__(f"{reason}: {line!r}")


class MalformedLine(CorruptLine):
    """Raised when a line does not split into exactly one key and one value."""

    def __init__(self, line: str) -> None:
        super().__init__(line, "Invalid format of line")


class LineDecodeError(CorruptLine):
    """Raised when the value half of a line is not valid base64."""

    def __init__(self, line: str) -> None:
        super().__init__(line, "Invalid base64 value in line")


class SettingsError(HpoonError):
    """Raised when a runtime setting cannot be parsed."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid value {value!r} for {name}: {reason}")


class StoreError(HpoonError):
    """Base exception for store file failures."""

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(message)


class StoreUnreadable(StoreError):
    """Raised when the store file exists but cannot be opened or read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Error reading hpoon marks file '{path}' reason: {reason}", path)


class StoreWriteError(StoreError):
    """Raised when the store file cannot be created, written, or removed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Error writing hpoon marks file '{path}' reason: {reason}", path)


class MarkError(HpoonError):
    """Base exception for mark lookups and updates."""


class MarkNotFound(MarkError):
    """Raised when no mark is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"mark '{name}' does not exist")


class InvalidMarkName(MarkError):
    """Raised when a name cannot be stored as a mark key."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"Invalid mark name {name!r}: {reason}")


class PathNotFound(MarkError):
    """Raised when asked to mark a path that does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Filepath doesn't exist: '{path}'")
