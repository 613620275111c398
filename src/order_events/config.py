from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

import dotenv

ENV_FILE_VAR = "ORDER_EVENTS_ENV_FILE"


@dataclass(frozen=True)
class Settings:
    """Runtime knobs for the contract library.

    Only the ambient concerns are configurable; the event contract itself is
    fixed and never read from the environment.
    """

    log_level: int = logging.INFO
    log_dir: Optional[str] = None


def _parse_level(raw: str | None) -> int:
    if raw is None or not raw.strip():
        return logging.INFO
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    # getLevelName returns "Level X" for unknown names
    if isinstance(level, int):
        return level
    raise ValueError(f"invalid ORDER_EVENTS_LOG_LEVEL: {raw!r}")


def _lookup(name: str, file_values: Mapping[str, Optional[str]]) -> Optional[str]:
    # the real environment wins over the .env file
    value = os.getenv(name)
    if value is None:
        value = file_values.get(name)
    return value


def load_settings(env_file: str | None = None, strict: bool = True) -> Settings:
    """Build Settings from the process environment and an optional .env file.

    The file is only read, never copied into ``os.environ``. With
    ``strict=False`` an unknown log level falls back to INFO with a warning
    instead of raising.
    """
    file_values = dotenv.dotenv_values(env_file) if env_file else {}
    raw_level = _lookup("ORDER_EVENTS_LOG_LEVEL", file_values)
    try:
        level = _parse_level(raw_level)
    except ValueError:
        if strict:
            raise
        logging.getLogger(__name__).warning("ignoring invalid ORDER_EVENTS_LOG_LEVEL %r, using INFO", raw_level)
        level = logging.INFO
    return Settings(
        log_level=level,
        log_dir=_lookup("ORDER_EVENTS_LOG_DIR", file_values) or None,
    )


# importing the library must never fail because of a logging setting
settings = load_settings(os.getenv(ENV_FILE_VAR), strict=False)
