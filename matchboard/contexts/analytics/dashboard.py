"""
Dashboard Assembly

Runs every analytics component over one DashboardSnapshot and collects the
results into a single immutable DashboardView.

The components are independent pure functions; only the recommendation rules
consume other components' output (summary stats and the top missing skills).
Building a view twice from the same snapshot yields equal views.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

from matchboard.contexts.analytics.config import AnalyticsConfig
from matchboard.contexts.analytics.data_structures import (
    AnalyticsSnapshot,
    MissingSkillEntry,
    Recommendation,
    ScoreDistributionBucket,
    SkillFrequencyEntry,
)
from matchboard.contexts.analytics.distribution import bucket_scores
from matchboard.contexts.analytics.logger import _log_info
from matchboard.contexts.analytics.missing_skills import rank_missing_skills
from matchboard.contexts.analytics.profile_insights import (
    ProfileInsights,
    RecentJobScore,
    recent_job_scores,
    summarize_profile,
)
from matchboard.contexts.analytics.recommendations import generate_recommendations
from matchboard.contexts.analytics.skill_frequency import rank_skill_frequency
from matchboard.contexts.analytics.stats import calculate_stats
from matchboard.contexts.intake.data_structures import DashboardSnapshot


@dataclass(frozen=True)
class DashboardView:
    """All derived analytics for one resume."""

    resume_id: str
    uploaded_at: Optional[str]
    profile: ProfileInsights
    stats: AnalyticsSnapshot
    top_skills: Tuple[SkillFrequencyEntry, ...]
    missing_skills: Tuple[MissingSkillEntry, ...]
    distribution: Tuple[ScoreDistributionBucket, ...]
    recent_scores: Tuple[RecentJobScore, ...]
    recommendations: Tuple[Recommendation, ...]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable representation (tuples become lists)."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, tuple):
                data[key] = list(value)
        for bucket, raw in zip(self.distribution, data["distribution"]):
            raw["range_label"] = bucket.range_label
        data["profile"]["top_skills"] = list(data["profile"]["top_skills"])
        return data


def build_dashboard(
    snapshot: DashboardSnapshot, config: Optional[AnalyticsConfig] = None
) -> DashboardView:
    """
    Derive every dashboard view model from a snapshot.

    Args:
        snapshot: Resume profile and its score records
        config: Thresholds and limits (defaults when omitted)

    Returns:
        DashboardView
    """
    config = config or AnalyticsConfig()
    profile = snapshot.profile
    records = snapshot.records

    stats = calculate_stats(records)
    ranked_missing = rank_missing_skills(records, limit=None)
    missing_skills = ranked_missing[: config.missing_skills_limit]
    top_missing_names = [
        entry.name for entry in ranked_missing[: config.recommended_skills_limit]
    ]

    view = DashboardView(
        resume_id=profile.id,
        uploaded_at=profile.uploaded_at.isoformat() if profile.uploaded_at else None,
        profile=summarize_profile(profile, records),
        stats=stats,
        top_skills=rank_skill_frequency(profile.skills, records, limit=config.top_skills_limit),
        missing_skills=missing_skills,
        distribution=bucket_scores(records),
        recent_scores=recent_job_scores(records, limit=config.recent_scores_limit),
        recommendations=generate_recommendations(stats, records, top_missing_names, config),
    )

    _log_info(
        f"Built dashboard for resume {profile.id}: {stats.total_jobs} jobs, "
        f"{len(view.recommendations)} recommendations"
    )
    return view
