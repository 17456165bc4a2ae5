"""
Session logging for matchboard commands.

One command run is one logging session: a DEBUG log file in the session
directory and INFO-and-above on stderr, so report text written to stdout
stays pipeable. Each session log opens with a provenance header.

Contexts wrap this in contexts/{context}/logger.py and add their prefix.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

import matchboard

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
)
HEADER_RULE = "=" * 80


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Start a logging session for one command run.

    Replaces any previously configured sinks, so calling it again (as the
    CLI tests do) starts a fresh session.

    Args:
        context_name: Context identifier, used as the log file name ("analytics")
        log_dir: Session directory, created if missing
        extra_provenance: Session-specific header entries (e.g. {"Resume ID": "42"})
        console_level: Minimum level echoed to stderr

    Returns:
        Path to the session log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)
    return log_file


def provenance_fields(extra: Optional[Dict[str, object]] = None) -> Dict[str, object]:
    """Header entries identifying how and where a session was run."""
    fields = {
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        "matchboard": matchboard.__version__,
    }
    fields.update(extra or {})
    return fields


def log_provenance(extra: Optional[Dict[str, object]] = None) -> None:
    """Write the provenance header to the configured sinks."""
    logger.info(HEADER_RULE)
    for key, value in provenance_fields(extra).items():
        logger.info(f"{key}: {value}")
    logger.info(HEADER_RULE)
