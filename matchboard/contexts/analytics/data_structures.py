"""
Analytics Data Structures

Immutable view models derived from a DashboardSnapshot. Every structure here
can be computed from an empty list of score records.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalyticsSnapshot:
    """
    Summary statistics over all score records.

    Attributes:
        total_jobs: Number of scored jobs
        average_score: Rounded mean overall score
        best_score: Rounded highest overall score
        improvement: Rounded spread between best and worst overall score
    """

    total_jobs: int = 0
    average_score: int = 0
    best_score: int = 0
    improvement: int = 0


@dataclass(frozen=True)
class SkillFrequencyEntry:
    """Resume skill with the share (0-100) of analyzed jobs it is relevant to."""

    name: str
    frequency_percent: int


@dataclass(frozen=True)
class ScoreDistributionBucket:
    """
    Performance tier with the number of jobs whose score falls in it.

    Attributes:
        label: Tier name ("Poor", "Fair", "Good", "Excellent")
        min_score: Inclusive lower bound
        max_score: Inclusive upper bound
        count: Number of score records in this tier
        description: Short explanation shown next to the tier
    """

    label: str
    min_score: int
    max_score: int
    count: int
    description: str

    @property
    def range_label(self) -> str:
        """Display label, e.g. "Fair (41-60%)"."""
        return f"{self.label} ({self.min_score}-{self.max_score}%)"

    def contains(self, score: float) -> bool:
        """Whether a (rounded) score falls within the inclusive range."""
        return self.min_score <= score <= self.max_score


@dataclass(frozen=True)
class MissingSkillEntry:
    """Skill missing from the resume and the number of times jobs asked for it."""

    name: str
    job_count: int


@dataclass(frozen=True)
class Recommendation:
    """Actionable advice shown on the dashboard."""

    title: str
    description: str
