"""Environment helpers for runtime configuration."""

import logging
import os
from functools import lru_cache


@lru_cache
def is_dev_mode() -> bool:
    """Return True when INSPECTVIEW_ENV or INSPECTVIEW_DEV_MODE asks for development mode."""
    value = os.environ.get("INSPECTVIEW_ENV") or os.environ.get("INSPECTVIEW_DEV_MODE")
    if not value:
        return False
    return value.strip().lower() in {"dev", "development", "1", "true", "yes"}


def default_log_level() -> int:
    return logging.DEBUG if is_dev_mode() else logging.INFO


__all__ = ["default_log_level", "is_dev_mode"]
