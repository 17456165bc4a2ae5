"""
Recommendation Rules

Generates personalized advice from aggregated score data. Rules are evaluated
in a fixed order and every rule that fires contributes one recommendation;
the output order is the evaluation order, which is the display priority.

Rules (thresholds from AnalyticsConfig, all strict comparisons):
1. No score records        -> "Start Job Analysis" (only this one)
2. avg ATS < 60            -> "Improve ATS Compatibility"
3. avg skill match < 70    -> "Develop Key Skills" (needs missing skills to name)
4. avg experience < 60     -> "Highlight Experience Better"
5. fewer than 5 jobs       -> "Analyze More Jobs"
6. best overall > 80       -> "Apply to High-Match Jobs"
7. none of 2-6 fired       -> "Great Progress!"
"""

from typing import List, Optional, Sequence, Tuple

from matchboard.contexts.analytics.config import AnalyticsConfig
from matchboard.contexts.analytics.data_structures import AnalyticsSnapshot, Recommendation
from matchboard.contexts.analytics.logger import _log_debug
from matchboard.contexts.intake.data_structures import ScoreRecord
from matchboard.utils.numbers import mean, round_half_up

START_ANALYSIS = Recommendation(
    title="Start Job Analysis",
    description=(
        "Search and analyze jobs to get personalized recommendations based on your resume"
    ),
)

GREAT_PROGRESS = Recommendation(
    title="Great Progress!",
    description=(
        "Your resume shows good alignment with job requirements. "
        "Keep analyzing more positions to find the best matches."
    ),
)


def generate_recommendations(
    stats: AnalyticsSnapshot,
    records: Sequence[ScoreRecord],
    top_missing_skills: Sequence[str],
    config: Optional[AnalyticsConfig] = None,
) -> Tuple[Recommendation, ...]:
    """
    Apply the recommendation rules to one resume's score data.

    Args:
        stats: Summary statistics from calculate_stats()
        records: Score records for the resume
        top_missing_skills: Names of the most frequently missing skills
            (typically the first three from rank_missing_skills())
        config: Thresholds (defaults when omitted)

    Returns:
        Recommendations in rule order; never empty
    """
    if not records:
        return (START_ANALYSIS,)

    config = config or AnalyticsConfig()
    avg_ats = mean(record.ats_score for record in records)
    avg_skill_match = mean(record.skill_match_score for record in records)
    avg_experience = mean(record.experience_score for record in records)

    recommendations: List[Recommendation] = []

    if avg_ats < config.ats_threshold:
        recommendations.append(
            Recommendation(
                title="Improve ATS Compatibility",
                description=(
                    f"Your average ATS score is {round_half_up(avg_ats)}%. "
                    "Add more relevant keywords from job descriptions to your resume."
                ),
            )
        )

    if avg_skill_match < config.skill_match_threshold and top_missing_skills:
        recommendations.append(
            Recommendation(
                title="Develop Key Skills",
                description=(
                    f"Focus on learning: {', '.join(top_missing_skills)}. "
                    "These skills appear frequently in your target jobs."
                ),
            )
        )

    if avg_experience < config.experience_threshold:
        recommendations.append(
            Recommendation(
                title="Highlight Experience Better",
                description=(
                    f"Your experience score is {round_half_up(avg_experience)}%. "
                    "Better showcase your projects, internships, and relevant work experience."
                ),
            )
        )

    if stats.total_jobs < config.min_jobs_for_insights:
        recommendations.append(
            Recommendation(
                title="Analyze More Jobs",
                description=(
                    "Analyze more job postings to get better insights "
                    "and improve your resume targeting."
                ),
            )
        )

    # Raw (unrounded) scores: 80.4 is a high match even though it displays as 80
    best_score = max(record.overall_score for record in records)
    if best_score > config.high_match_threshold:
        high_matches = sum(
            1 for record in records if record.overall_score > config.high_match_threshold
        )
        recommendations.append(
            Recommendation(
                title="Apply to High-Match Jobs",
                description=(
                    f"You have {high_matches} jobs with {config.high_match_threshold:g}%+ match. "
                    "Focus on applying to these positions."
                ),
            )
        )

    _log_debug(f"{len(recommendations)} recommendation rules fired")
    return tuple(recommendations) if recommendations else (GREAT_PROGRESS,)
