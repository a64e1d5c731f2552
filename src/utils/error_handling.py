"""Standardized error handling and performance utilities.

This module provides:
1. User-friendly error message formatting for the CLI
2. Structured context logging for errors
3. An error collector for batch jobs such as blade chart generation
4. A performance timing decorator for profiling hot paths

Usage in batch loops:
    from utils.error_handling import ErrorCollector

    collector = ErrorCollector("blade chart")
    for combo in combos:
        with collector.catch(f"{combo.paper} / {combo.ratio}"):
            rows.append(build_row(combo))

Performance timing usage:
    from utils.error_handling import timed

    @timed
    def calculate(settings):
        ...

    # Enable timing with: EASEL_PERF_DEBUG=1
"""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from .env import is_perf_debug

logger = logging.getLogger(__name__)

PERF_DEBUG = is_perf_debug()

F = TypeVar("F", bound=Callable[..., Any])


def timed(func: F) -> F:
    """Decorator to log execution time of functions.

    Only active when EASEL_PERF_DEBUG=1 is set at import time. Timings are
    logged at DEBUG level.
    """
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not PERF_DEBUG:
            return func(*args, **kwargs)

        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
            elapsed = time.perf_counter() - start
            logger.debug(f"PERF: {func.__module__}.{func.__name__} took {elapsed:.3f}s")
            return result
        except Exception:
            elapsed = time.perf_counter() - start
            logger.debug(f"PERF: {func.__module__}.{func.__name__} failed after {elapsed:.3f}s")
            raise

    return wrapper  # type: ignore


def format_error_message(
    error: Exception,
    context: Optional[str] = None,
    include_type: bool = True,
) -> str:
    """Format an exception into a user-friendly message.

    Args:
        error: The exception that occurred
        context: Optional context describing what was being done
        include_type: Whether to include the exception type name

    Returns:
        Formatted error message suitable for display to users
    """
    error_str = str(error)

    if not error_str or error_str == "None":
        error_str = type(error).__name__
        include_type = False

    parts = []
    if context:
        parts.append(context)

    if include_type:
        parts.append(f"{type(error).__name__}: {error_str}")
    else:
        parts.append(error_str)

    return " - ".join(parts) if len(parts) > 1 else parts[0]


def log_exception(
    error: Exception,
    context: str,
    extra: Optional[dict] = None,
    level: int = logging.ERROR,
) -> None:
    """Log an exception with structured context and its traceback.

    Args:
        error: The exception that occurred
        context: Description of what was being done when error occurred
        extra: Additional context to include in the log record
        level: Logging level (default ERROR)
    """
    log_extra = {"event": "error", "error_type": type(error).__name__}
    if extra:
        log_extra.update(extra)

    logger.log(level, f"{context}: {error}", extra=log_extra, exc_info=True)


class ErrorCollector:
    """Collects errors during batch operations without stopping.

    Only ``Exception`` subclasses are collected; the failing item is skipped
    and the loop continues.
    """

    def __init__(self, operation_name: str):
        self.operation_name = operation_name
        self.errors: list[str] = []
        self._current_context: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def catch(self, context: str):
        """Context manager that catches and collects errors.

        Args:
            context: Description of current item
        """
        self._current_context = context
        return self

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val is not None and isinstance(exc_val, Exception):
            error_msg = format_error_message(exc_val, self._current_context)
            self.errors.append(error_msg)
            log_exception(
                exc_val,
                f"{self.operation_name}: {self._current_context}",
                level=logging.WARNING,
            )
            return True
        return False

    def add_error(self, message: str) -> None:
        """Manually add an error message."""
        self.errors.append(message)
        logger.warning(f"{self.operation_name}: {message}")

    def get_summary(self) -> str:
        """Get a summary of collected errors."""
        if not self.errors:
            return f"{self.operation_name} completed successfully"
        return f"{self.operation_name} completed with {len(self.errors)} error(s)"
