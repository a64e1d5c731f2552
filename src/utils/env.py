"""Environment helpers for runtime configuration."""

import logging
import os
from functools import lru_cache

_TRUTHY = {"dev", "development", "1", "true", "yes"}


@lru_cache
def is_dev_mode() -> bool:
    """Return True when the tools run in development mode."""
    value = os.environ.get("EASEL_ENV") or os.environ.get("EASEL_DEV_MODE")
    if not value:
        return False
    return value.strip().lower() in _TRUTHY


def is_perf_debug() -> bool:
    """Performance timing switch read by utils.error_handling."""
    return os.environ.get("EASEL_PERF_DEBUG", "0").strip() == "1"


def get_log_level() -> int:
    """Level from EASEL_LOG_LEVEL, DEBUG in dev mode, INFO otherwise."""
    name = (os.environ.get("EASEL_LOG_LEVEL") or "").strip().upper()
    if name:
        level = logging.getLevelName(name)
        if isinstance(level, int):
            return level
    return logging.DEBUG if is_dev_mode() else logging.INFO


__all__ = ["is_dev_mode", "is_perf_debug", "get_log_level"]
