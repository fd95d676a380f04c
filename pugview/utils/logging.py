# pugview/utils/logging.py
from __future__ import annotations

import logging
import os
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"
_LEVEL_ENV_VAR = "PUGVIEW_LOG_LEVEL"
_DEBUG_FLAG = "PUGVIEW_DEBUG"

def coerce_level(value: Optional[str | int], fallback: int = logging.INFO) -> int:
    if isinstance(value, int):
        return value
    if not value or not value.strip():
        return fallback
    text = value.strip()
    if text.isdigit():
        return int(text)
    candidate = getattr(logging, text.upper(), None)
    if isinstance(candidate, int):
        return candidate
    return fallback

def _env_level() -> Optional[int]:
    value = os.getenv(_LEVEL_ENV_VAR)
    if value:
        return coerce_level(value)
    flag = os.getenv(_DEBUG_FLAG)
    if flag is not None and flag.strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None

def configure_root(default_level: int | str = logging.INFO) -> int:
    """
    Configure the root logger with a compact format.

    PUGVIEW_LOG_LEVEL sets the level explicitly; a truthy PUGVIEW_DEBUG
    forces DEBUG. Returns the effective level.
    """
    env_level = _env_level()
    effective = env_level if env_level is not None else coerce_level(default_level)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    root.setLevel(effective)
    return effective
