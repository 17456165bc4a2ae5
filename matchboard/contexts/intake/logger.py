"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_fetch_failure(kind: str, resume_id: str, error: Exception) -> None:
    """Log a fetch failure that was absorbed into an empty result."""
    _log_warning(f"Could not load {kind} for resume {resume_id}; using empty data")
    _log_debug(f"  Cause: {type(error).__name__}: {error}")


def log_snapshot_loaded(resume_id: str, num_skills: int, num_records: int) -> None:
    _log_info(f"Loaded resume {resume_id}: {num_skills} skills, {num_records} score records")
