"""Runtime settings for hpoon: the fixed store location and the diagnostics log level.

Only the log level is read (via python-decouple); the store location is never
configurable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from decouple import Config as DecoupleConfig, RepositoryEmpty, RepositoryEnv

from hpoon.exceptions import SettingsError
from hpoon.paths import resolve_store_path

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_VARIABLE = "HPOON_LOG_LEVEL"


@dataclass
class Settings:
    store_path: Path
    log_level: int


def load_config(env_path: Optional[str] = None) -> DecoupleConfig:
    """Return a decouple config over the process environment.

    When ``env_path`` points at an existing file its values are used as
    fallbacks for variables missing from the environment.
    """

    if env_path and Path(env_path).exists():
        return DecoupleConfig(RepositoryEnv(env_path))
    return DecoupleConfig(RepositoryEmpty())


def _parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise SettingsError(LOG_LEVEL_VARIABLE, value, "unknown log level")
    return level


def get_settings(env_path: Optional[str] = None) -> Settings:
    """Resolve runtime settings; the store location itself is never configurable."""

    config = load_config(env_path)
    log_level = config(LOG_LEVEL_VARIABLE, default=DEFAULT_LOG_LEVEL, cast=_parse_log_level)
    return Settings(store_path=resolve_store_path(), log_level=log_level)
