"""Root logger setup shared by the desktop and web entry points.

``SERNUM_LOG_LEVEL`` (a level name) wins over everything; otherwise a truthy
``SERNUM_DEBUG`` forces DEBUG. Without either, callers pick the level.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LEVEL_ENV = "SERNUM_LOG_LEVEL"
DEBUG_ENV = "SERNUM_DEBUG"
_TRUTHY = {"1", "true", "yes", "on"}


def _level_from_name(name: str, fallback: int) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else fallback


def env_level() -> Optional[int]:
    """Level forced by the environment, or ``None`` when nothing is set."""
    name = os.getenv(LEVEL_ENV, "").strip()
    if name:
        return _level_from_name(name, logging.INFO)
    if os.getenv(DEBUG_ENV, "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def configure_root(default_level: Union[int, str] = logging.INFO) -> int:
    if isinstance(default_level, str):
        default_level = _level_from_name(default_level, logging.INFO)
    level = env_level()
    if level is None:
        level = default_level

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT, datefmt="%H:%M:%S")
    root.setLevel(level)
    return level


def apply_gui_preferences(debug_enabled: bool) -> int:
    """Apply the settings debug toggle unless the environment pins a level."""
    level = env_level()
    if level is None:
        level = logging.DEBUG if debug_enabled else logging.INFO
    logging.getLogger().setLevel(level)
    return level


def env_requests_debug() -> bool:
    level = env_level()
    return level is not None and level <= logging.DEBUG
