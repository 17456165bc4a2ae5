"""
Analytics Context

Responsibilities:
- Summary statistics over a resume's job scores
- Skill frequency against the analyzed jobs' required skills
- Score distribution across fixed performance tiers
- Ranking of skills missing from the resume
- Rule-based recommendations built from the above
- Assembly of all views into one dashboard view

Owns: Aggregation and recommendation logic, rule thresholds
Never: Reads files, talks to services or formats output for display
"""

from matchboard.contexts.analytics.config import AnalyticsConfig, load_analytics_config
from matchboard.contexts.analytics.dashboard import DashboardView, build_dashboard
from matchboard.contexts.analytics.data_structures import (
    AnalyticsSnapshot,
    MissingSkillEntry,
    Recommendation,
    ScoreDistributionBucket,
    SkillFrequencyEntry,
)
from matchboard.contexts.analytics.distribution import bucket_scores
from matchboard.contexts.analytics.missing_skills import rank_missing_skills
from matchboard.contexts.analytics.recommendations import generate_recommendations
from matchboard.contexts.analytics.skill_frequency import rank_skill_frequency
from matchboard.contexts.analytics.stats import calculate_stats

__all__ = [
    # Configuration
    "AnalyticsConfig",
    "load_analytics_config",
    # Components
    "calculate_stats",
    "rank_skill_frequency",
    "bucket_scores",
    "rank_missing_skills",
    "generate_recommendations",
    # Assembly
    "build_dashboard",
    "DashboardView",
    # View models
    "AnalyticsSnapshot",
    "SkillFrequencyEntry",
    "ScoreDistributionBucket",
    "MissingSkillEntry",
    "Recommendation",
]
