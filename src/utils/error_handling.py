"""Error handling and timing helpers.

Navigation and report loading absorb collaborator failures here so they are
logged with context instead of reaching the event loop:

    from utils.error_handling import log_exception

    try:
        editor.move_caret(offset)
    except Exception as e:
        log_exception(e, "Could not move caret", level=logging.WARNING)

Performance timing:

    @timed
    def build(results): ...

    # Enable with: INSPECTVIEW_PERF_DEBUG=1
"""

from __future__ import annotations

import logging
import os
import time
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

PERF_DEBUG = os.environ.get("INSPECTVIEW_PERF_DEBUG", "0") == "1"

F = TypeVar("F", bound=Callable[..., Any])


def timed(func: F) -> F:
    """Log execution time at DEBUG when INSPECTVIEW_PERF_DEBUG=1."""
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not PERF_DEBUG:
            return func(*args, **kwargs)

        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start
            logger.debug("PERF: %s.%s took %.3fs", func.__module__, func.__qualname__, elapsed)

    return wrapper  # type: ignore


def format_error_message(
    error: Exception,
    context: Optional[str] = None,
    include_type: bool = True,
) -> str:
    """Format an exception for display, e.g. "Loading report - ReportError: bad XML"."""
    error_str = str(error)

    if not error_str or error_str == "None":
        error_str = type(error).__name__
        include_type = False

    message = f"{type(error).__name__}: {error_str}" if include_type else error_str
    return f"{context} - {message}" if context else message


def log_exception(
    error: Exception,
    context: str,
    extra: Optional[dict] = None,
    level: int = logging.ERROR,
) -> None:
    """Log ``error`` with context and traceback at ``level``."""
    log_extra = {"event": "error", "error_type": type(error).__name__}
    if extra:
        log_extra.update(extra)

    logger.log(level, "%s: %s", context, error, extra=log_extra, exc_info=True)
