"""Unit tests for resume skill frequency ranking."""

import pytest

from matchboard.contexts.analytics import SkillFrequencyEntry, rank_skill_frequency
from matchboard.contexts.analytics.skill_frequency import count_skill_matches, skills_match
from matchboard.contexts.intake import JobPost, ScoreRecord


def _job(*required):
    return ScoreRecord(job_post=JobPost(skills_required=tuple(required)))


@pytest.mark.unit
def test_skills_match_is_case_insensitive_and_bidirectional():
    assert skills_match("React", "react.js")
    assert skills_match("react.js", "React")
    assert skills_match("Machine Learning", "learning")
    assert not skills_match("Java", "Go")


@pytest.mark.unit
def test_react_matches_react_js():
    result = rank_skill_frequency(["React"], [_job("react.js")])
    assert result == (SkillFrequencyEntry(name="React", frequency_percent=100),)


@pytest.mark.unit
def test_empty_records_fall_back_to_resume_skills():
    skills = [f"skill{i}" for i in range(10)]
    result = rank_skill_frequency(skills, [])

    assert [entry.name for entry in result] == skills[:8]
    assert all(entry.frequency_percent == 100 for entry in result)


@pytest.mark.unit
def test_empty_resume_and_records_give_empty_result():
    assert rank_skill_frequency([], []) == ()


@pytest.mark.unit
def test_no_matches_fall_back_to_resume_skills():
    result = rank_skill_frequency(["Go", "Rust"], [_job("cobol"), _job("fortran")])
    assert result == (
        SkillFrequencyEntry(name="Go", frequency_percent=100),
        SkillFrequencyEntry(name="Rust", frequency_percent=100),
    )


@pytest.mark.unit
def test_records_without_job_post_contribute_nothing():
    records = [ScoreRecord(), ScoreRecord(job_post=None), _job("python")]
    assert count_skill_matches(["Python"], records) == {"Python": 1}


@pytest.mark.unit
def test_frequency_is_share_of_all_jobs():
    """Percentages divide by every analyzed job, not only jobs with skill data."""
    records = [_job("python", "sql"), _job("python"), ScoreRecord(), ScoreRecord()]
    result = rank_skill_frequency(["SQL", "Python"], records)

    assert result == (
        SkillFrequencyEntry(name="Python", frequency_percent=50),
        SkillFrequencyEntry(name="SQL", frequency_percent=25),
    )


@pytest.mark.unit
def test_ties_keep_resume_order():
    records = [_job("docker", "aws", "python")]
    result = rank_skill_frequency(["Python", "AWS", "Docker"], records)

    assert [entry.name for entry in result] == ["Python", "AWS", "Docker"]


@pytest.mark.unit
def test_only_matched_skills_are_listed():
    result = rank_skill_frequency(["Python", "Haskell"], [_job("python")])
    assert [entry.name for entry in result] == ["Python"]


@pytest.mark.unit
def test_multiple_matches_in_one_job_are_capped_at_100():
    """Java matches both java and javascript in the same job."""
    result = rank_skill_frequency(["Java"], [_job("java", "javascript")])
    assert result == (SkillFrequencyEntry(name="Java", frequency_percent=100),)


@pytest.mark.unit
def test_result_is_truncated_to_limit():
    skills = [f"skill_{letter}" for letter in "abcdefghijkl"]
    records = [_job(*skills)]

    assert [entry.name for entry in rank_skill_frequency(skills, records)] == skills[:8]
    assert [entry.name for entry in rank_skill_frequency(skills, records, limit=3)] == skills[:3]


@pytest.mark.unit
def test_ranking_is_deterministic():
    records = [_job("python", "react"), _job("sql"), _job("python")]
    skills = ["SQL", "React", "Python"]
    assert rank_skill_frequency(skills, records) == rank_skill_frequency(skills, records)
