"""
Default values for MATCHBOARD analytics.

Provides the fixed score distribution tiers and the default rule thresholds
and list limits. Thresholds and limits can be overridden through
AnalyticsConfig (see config.py); the tiers cannot.
"""

from typing import Tuple

from matchboard.contexts.analytics.data_structures import ScoreDistributionBucket

# (label, min, max, description), inclusive ranges
SCORE_BUCKET_DEFINITIONS: Tuple[Tuple[str, int, int, str], ...] = (
    ("Poor", 0, 40, "Needs significant improvement"),
    ("Fair", 41, 60, "Room for improvement"),
    ("Good", 61, 80, "Strong match"),
    ("Excellent", 81, 100, "Perfect match"),
)

# Recommendation rule thresholds (all strict "<" / ">" comparisons)
ATS_THRESHOLD = 60
SKILL_MATCH_THRESHOLD = 70
EXPERIENCE_THRESHOLD = 60
MIN_JOBS_FOR_INSIGHTS = 5
HIGH_MATCH_THRESHOLD = 80

# List limits
TOP_SKILLS_LIMIT = 8
MISSING_SKILLS_LIMIT = 6
RECOMMENDED_SKILLS_LIMIT = 3
RECENT_SCORES_LIMIT = 5

# Frequency assigned to every resume skill when no job data matched
FALLBACK_SKILL_FREQUENCY = 100


def empty_buckets() -> Tuple[ScoreDistributionBucket, ...]:
    """Fresh zero-count buckets for every tier, in tier order."""
    return tuple(
        ScoreDistributionBucket(
            label=label, min_score=low, max_score=high, count=0, description=description
        )
        for label, low, high, description in SCORE_BUCKET_DEFINITIONS
    )
