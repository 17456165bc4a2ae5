"""
Shared utilities for MATCHBOARD.

Common functionality used across contexts:
- Logger setup with provenance
- Numeric rounding and averaging
- Text table formatting
- Timestamp parsing and display
"""

from matchboard.utils.numbers import clamp, mean, round_half_up
from matchboard.utils.timestamp import now, parse_timestamp

__all__ = ["clamp", "mean", "round_half_up", "now", "parse_timestamp"]
