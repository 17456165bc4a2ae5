"""
Integration tests for file-backed intake.

Loads the JSON payload fixtures from tests/fixtures/ the way the dashboard
loads them from the data directory.
"""

import json
from pathlib import Path

import pytest

from matchboard.contexts.intake import (
    InvalidPayloadError,
    ResumeNotFoundError,
    fetch_resume_profile,
    fetch_score_records,
    load_snapshot,
)

FIXTURES_PATH = Path(__file__).parents[1] / "fixtures"


@pytest.mark.integration
def test_fetch_nested_resume_profile():
    profile = fetch_resume_profile("42", FIXTURES_PATH)

    assert profile.id == "42"
    assert profile.email == "alex@example.com"
    assert profile.skills == ("Python", "React", "SQL", "Docker", "Machine Learning")
    assert profile.experience_years == 3


@pytest.mark.integration
def test_fetch_flat_resume_profile():
    profile = fetch_resume_profile("7", FIXTURES_PATH)

    assert profile.email == "sam@example.com"
    assert profile.skills == ("Go", "Rust")


@pytest.mark.integration
def test_missing_resume_raises():
    with pytest.raises(ResumeNotFoundError) as exc_info:
        fetch_resume_profile("999", FIXTURES_PATH)
    assert exc_info.value.resume_id == "999"
    assert exc_info.value.path == FIXTURES_PATH / "resumes" / "999.json"


@pytest.mark.integration
def test_path_like_identifier_is_not_found():
    with pytest.raises(ResumeNotFoundError):
        fetch_resume_profile("../resumes/42", FIXTURES_PATH)


@pytest.mark.integration
def test_invalid_resume_json_raises(tmp_path):
    (tmp_path / "resumes").mkdir()
    (tmp_path / "resumes" / "1.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(InvalidPayloadError) as exc_info:
        fetch_resume_profile("1", tmp_path)
    assert exc_info.value.payload_path == tmp_path / "resumes" / "1.json"


@pytest.mark.integration
def test_undecodable_resume_file_raises(tmp_path):
    (tmp_path / "resumes").mkdir()
    path = tmp_path / "resumes" / "1.json"
    path.write_bytes(b'{"id": "\xff\xfe"}')

    with pytest.raises(InvalidPayloadError) as exc_info:
        fetch_resume_profile("1", tmp_path)
    assert exc_info.value.payload_path == path
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


@pytest.mark.integration
def test_resume_path_that_is_a_directory_raises(tmp_path):
    (tmp_path / "resumes" / "1.json").mkdir(parents=True)

    with pytest.raises(InvalidPayloadError) as exc_info:
        fetch_resume_profile("1", tmp_path)
    assert isinstance(exc_info.value.__cause__, OSError)


@pytest.mark.integration
def test_malformed_resume_field_reports_path(tmp_path):
    (tmp_path / "resumes").mkdir()
    path = tmp_path / "resumes" / "1.json"
    path.write_text(json.dumps({"analysis": {"skills": "Python"}}), encoding="utf-8")

    with pytest.raises(InvalidPayloadError) as exc_info:
        fetch_resume_profile("1", tmp_path)
    assert exc_info.value.field == "analysis.skills"
    assert exc_info.value.payload_path == path


@pytest.mark.integration
def test_fetch_score_records():
    records = fetch_score_records("42", FIXTURES_PATH)

    assert [record.job_id for record in records] == ["j1", "j2", "j3", "j4"]
    assert records[0].job_post.skills_required == ("python", "sql", "kubernetes", "aws")
    assert records[2].missing_skills == ("AWS", "Statistics", "Statistics")
    assert records[3].job_post.skills_required == ()


@pytest.mark.integration
def test_scores_wrapped_in_object(tmp_path):
    (tmp_path / "scores").mkdir()
    payload = {"scores": [{"overall_score": 50, "ats_score": 50,
                           "skill_match_score": 50, "experience_score": 50}]}
    (tmp_path / "scores" / "1.json").write_text(json.dumps(payload), encoding="utf-8")

    assert len(fetch_score_records("1", tmp_path)) == 1


@pytest.mark.integration
@pytest.mark.parametrize("resume_id", ["7", "13", "../42"])
def test_score_fetch_failures_become_empty(resume_id):
    """Missing files, invalid JSON and bad identifiers all yield no records."""
    assert fetch_score_records(resume_id, FIXTURES_PATH) == ()


@pytest.mark.integration
def test_malformed_score_record_becomes_empty(tmp_path):
    (tmp_path / "scores").mkdir()
    payload = [{"overall_score": 50, "ats_score": 50, "skill_match_score": 50,
                "experience_score": 50},
               {"overall_score": "n/a"}]
    (tmp_path / "scores" / "1.json").write_text(json.dumps(payload), encoding="utf-8")

    assert fetch_score_records("1", tmp_path) == ()


@pytest.mark.integration
def test_load_snapshot():
    snapshot = load_snapshot("42", FIXTURES_PATH)

    assert snapshot.profile.id == "42"
    assert len(snapshot.records) == 4
    assert isinstance(snapshot.records, tuple)


@pytest.mark.integration
def test_load_snapshot_without_scores():
    snapshot = load_snapshot("13", FIXTURES_PATH)

    assert snapshot.profile.skills == ("Java",)
    assert snapshot.records == ()
