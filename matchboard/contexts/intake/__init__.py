"""
Intake Context

Responsibilities:
- Loads resume analysis and score payloads for a resume identifier
- Normalizes alternate payload layouts into one canonical shape
- Absorbs score-fetch failures into empty data

Owns: Canonical ResumeProfile / ScoreRecord structures, payload normalization
Never: Aggregates scores or makes recommendations
"""

from matchboard.contexts.intake.data_structures import (
    DashboardSnapshot,
    JobPost,
    ResumeProfile,
    ScoreRecord,
)
from matchboard.contexts.intake.exceptions import (
    IntakeError,
    InvalidPayloadError,
    ResumeNotFoundError,
)
from matchboard.contexts.intake.loader import (
    fetch_resume_profile,
    fetch_score_records,
    load_snapshot,
)

__all__ = [
    "DashboardSnapshot",
    "JobPost",
    "ResumeProfile",
    "ScoreRecord",
    "IntakeError",
    "InvalidPayloadError",
    "ResumeNotFoundError",
    "fetch_resume_profile",
    "fetch_score_records",
    "load_snapshot",
]
