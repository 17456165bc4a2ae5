"""Timestamp formatting utilities."""

from datetime import datetime
from typing import Optional, Union


def parse_timestamp(value: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Parse an ISO 8601 timestamp into a datetime.

    Accepts a trailing "Z" (UTC designator) which datetime.fromisoformat
    rejects on older interpreters.

    Returns:
        datetime, or None if the value is empty or unparseable
    """
    if value is None or isinstance(value, datetime):
        return value

    text = str(value).strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def now() -> str:
    """Current local time as a compact timestamp for log directory names."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
