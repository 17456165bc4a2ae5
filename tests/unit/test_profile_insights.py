"""Unit tests for resume profile insights and recent job scores."""

import pytest

from matchboard.contexts.analytics.profile_insights import (
    experience_level_label,
    recent_job_scores,
    skill_coverage_label,
    summarize_profile,
)
from matchboard.contexts.intake import ResumeProfile, ScoreRecord


@pytest.mark.unit
@pytest.mark.parametrize(
    "count,label",
    [(0, "Limited skills"), (5, "Limited skills"), (6, "Good coverage"),
     (10, "Good coverage"), (11, "Comprehensive")],
)
def test_skill_coverage_label(count, label):
    assert skill_coverage_label(count) == label


@pytest.mark.unit
@pytest.mark.parametrize(
    "years,label",
    [(0, "Entry-level"), (1.5, "Entry-level"), (2, "Mid-level"), (4.9, "Mid-level"), (5, "Senior")],
)
def test_experience_level_label(years, label):
    assert experience_level_label(years) == label


@pytest.mark.unit
def test_summarize_profile():
    profile = ResumeProfile(
        id="42", email="alex@example.com", skills=("Python", "React", "SQL", "Go"),
        experience_years=3,
    )

    insights = summarize_profile(profile, [ScoreRecord(), ScoreRecord()])

    assert insights.email == "alex@example.com"
    assert insights.skill_count == 4
    assert insights.top_skills == ("Python", "React", "SQL")
    assert insights.experience_level == "Mid-level"
    assert insights.experience_summary == "3 years professional experience"
    assert insights.jobs_analyzed == 2


@pytest.mark.unit
def test_unspecified_experience():
    insights = summarize_profile(ResumeProfile(id="1"), [])

    assert insights.experience_summary == "Experience level not clearly specified"
    assert insights.top_skills == ()
    assert insights.jobs_analyzed == 0


@pytest.mark.unit
def test_recent_job_scores_round_and_fill_placeholders():
    records = [
        ScoreRecord(job_id="a", job_title="SRE", company="Acme", overall_score=62.5,
                    ats_score=49.5, skill_match_score=70.2, experience_score=80),
        ScoreRecord(job_id="b"),
    ]

    recent = recent_job_scores(records, limit=5)

    assert len(recent) == 2
    first = recent[0]
    assert (first.overall_score, first.ats_score, first.skill_match_score) == (63, 50, 70)
    assert (recent[1].job_title, recent[1].company) == ("Job Title", "Company")


@pytest.mark.unit
def test_recent_job_scores_limit():
    records = [ScoreRecord(job_id=str(i)) for i in range(8)]
    assert [score.job_id for score in recent_job_scores(records, limit=5)] == list("01234")
