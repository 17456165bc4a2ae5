"""
Analytics context logger.

Provides logging interface for analytics context with automatic [analytics] prefix.
All analytics modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from matchboard.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[analytics]"


def setup_analytics_logger(log_dir: Path, resume_id: str) -> Path:
    """
    Setup logger for an analytics session.

    Args:
        log_dir: Directory for this session
        resume_id: Resume being analyzed (recorded in provenance)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="analytics",
        log_dir=log_dir,
        extra_provenance={"Resume ID": resume_id},
    )


def _log_info(message: str) -> None:
    """Log info message with [analytics] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [analytics] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
