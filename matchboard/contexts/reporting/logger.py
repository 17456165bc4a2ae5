"""
Reporting context logger.

Provides logging interface for reporting context with automatic [report] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[report]"


def _log_success(message: str) -> None:
    """Log success message with [report] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [report] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
