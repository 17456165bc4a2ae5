"""
Profile Insights

Descriptive labels for the resume itself (skill coverage, seniority) and a
compact view of the most recent job scores.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from matchboard.contexts.intake.data_structures import ResumeProfile, ScoreRecord
from matchboard.utils.numbers import round_half_up

JOB_TITLE_PLACEHOLDER = "Job Title"
COMPANY_PLACEHOLDER = "Company"


@dataclass(frozen=True)
class ProfileInsights:
    """
    Summary of a resume profile for the dashboard header.

    Attributes:
        email: Owner's email address
        skill_count: Number of skills extracted
        skill_coverage: "Comprehensive", "Good coverage" or "Limited skills"
        experience_years: Years of professional experience
        experience_level: "Senior", "Mid-level" or "Entry-level"
        experience_summary: Sentence describing the experience
        top_skills: First three resume skills
        jobs_analyzed: Number of score records
    """

    email: str
    skill_count: int
    skill_coverage: str
    experience_years: float
    experience_level: str
    experience_summary: str
    top_skills: Tuple[str, ...]
    jobs_analyzed: int


@dataclass(frozen=True)
class RecentJobScore:
    """One score record with display-ready, rounded scores."""

    job_id: str
    job_title: str
    company: str
    overall_score: int
    ats_score: int
    skill_match_score: int
    experience_score: int


def skill_coverage_label(skill_count: int) -> str:
    if skill_count > 10:
        return "Comprehensive"
    if skill_count > 5:
        return "Good coverage"
    return "Limited skills"


def experience_level_label(experience_years: float) -> str:
    if experience_years >= 5:
        return "Senior"
    if experience_years >= 2:
        return "Mid-level"
    return "Entry-level"


def _format_years(years: float) -> str:
    return f"{years:g}"


def summarize_profile(profile: ResumeProfile, records: Sequence[ScoreRecord]) -> ProfileInsights:
    """
    Build header insights for a resume.

    Args:
        profile: Resume profile
        records: Score records (only counted)
    """
    if profile.experience_years > 0:
        experience_summary = (
            f"{_format_years(profile.experience_years)} years professional experience"
        )
    else:
        experience_summary = "Experience level not clearly specified"

    return ProfileInsights(
        email=profile.email,
        skill_count=len(profile.skills),
        skill_coverage=skill_coverage_label(len(profile.skills)),
        experience_years=profile.experience_years,
        experience_level=experience_level_label(profile.experience_years),
        experience_summary=experience_summary,
        top_skills=tuple(profile.skills[:3]),
        jobs_analyzed=len(records),
    )


def recent_job_scores(records: Sequence[ScoreRecord], limit: int) -> Tuple[RecentJobScore, ...]:
    """First `limit` score records, rounded for display, with placeholder names."""
    return tuple(
        RecentJobScore(
            job_id=record.job_id,
            job_title=record.job_title or JOB_TITLE_PLACEHOLDER,
            company=record.company or COMPANY_PLACEHOLDER,
            overall_score=round_half_up(record.overall_score),
            ats_score=round_half_up(record.ats_score),
            skill_match_score=round_half_up(record.skill_match_score),
            experience_score=round_half_up(record.experience_score),
        )
        for record in list(records)[:limit]
    )
