"""Fixed location of the shared mark store file."""

from __future__ import annotations

import sys
from pathlib import Path

__all__ = ["WINDOWS_STORE_LOCATION", "POSIX_STORE_LOCATION", "resolve_store_path", "store_location"]

WINDOWS_STORE_LOCATION = "C:\\Windows\\Temp\\hpoon"
POSIX_STORE_LOCATION = "/tmp/hpoon"


def store_location(platform: str) -> str:
    """Return the store file location for a ``sys.platform`` value."""

    if platform.startswith("win"):
        return WINDOWS_STORE_LOCATION
    return POSIX_STORE_LOCATION


def resolve_store_path() -> Path:
    """Return the single store file shared by every hpoon invocation on this host."""

    return Path(store_location(sys.platform))
