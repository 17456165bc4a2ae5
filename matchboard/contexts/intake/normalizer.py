"""
Payload Normalization

Converts raw API payloads (as returned by the resume analysis and scoring
services) into one canonical field layout before any data structure is built.

The services are not consistent about where fields live:
- Resume payloads carry user_email / uploaded_at either under "resume" or at
  the top level; skills and experience live under "analysis".
- Score payloads may omit job_post, missing_skills or recommendations entirely.

Everything downstream of this module sees exactly one shape.
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple

from matchboard.contexts.intake.exceptions import InvalidPayloadError
from matchboard.contexts.intake.logger import _log_warning
from matchboard.utils.numbers import clamp

SCORE_FIELDS = ("overall_score", "ats_score", "skill_match_score", "experience_score")


def _require_mapping(payload: Any, what: str) -> Mapping:
    if not isinstance(payload, Mapping):
        raise InvalidPayloadError(
            f"{what} payload must be an object, got {type(payload).__name__}"
        )
    return payload


def _first_present(*values: Any) -> Any:
    """Return the first value that is not None or empty string."""
    for value in values:
        if value is not None and value != "":
            return value
    return None


def normalize_string_list(value: Any, field: str) -> Tuple[str, ...]:
    """
    Normalize a list of names (skills, recommendations) to a tuple of strings.

    Absent values become an empty tuple. Entries are stripped and blank entries
    dropped; order and duplicates are preserved.

    Raises:
        InvalidPayloadError: If the value is present but not a list
    """
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InvalidPayloadError(
            f"Expected a list, got {type(value).__name__}", field=field
        )

    items = []
    for item in value:
        if item is None:
            continue
        text = str(item).strip()
        if text:
            items.append(text)
    return tuple(items)


def normalize_score(value: Any, field: str) -> float:
    """
    Normalize a score to a float in [0, 100].

    Out-of-range values are clamped (with a warning) rather than rejected.

    Raises:
        InvalidPayloadError: If the value is missing or not numeric
    """
    if value is None or isinstance(value, bool):
        raise InvalidPayloadError("Score is missing or not numeric", field=field)

    try:
        score = float(value)
    except (TypeError, ValueError):
        raise InvalidPayloadError(f"Score is not numeric: {value!r}", field=field)

    if score != score:  # NaN
        raise InvalidPayloadError("Score is NaN", field=field)

    clamped = clamp(score)
    if clamped != score:
        _log_warning(f"Clamped {field}={score} into [0, 100]")
    return clamped


def normalize_resume_payload(payload: Any, resume_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Normalize a resume analysis payload.

    Args:
        payload: Raw payload from the resume analysis endpoint
        resume_id: Identifier used to request the payload (fallback for "id")

    Returns:
        Dict with keys: id, email, skills, experience_years, uploaded_at

    Raises:
        InvalidPayloadError: If the payload is not an object or a field has the wrong type
    """
    payload = _require_mapping(payload, "Resume")
    resume_block = payload.get("resume") or {}
    resume_block = _require_mapping(resume_block, "Resume 'resume'")
    analysis = payload.get("analysis") or {}
    analysis = _require_mapping(analysis, "Resume 'analysis'")

    experience = _first_present(analysis.get("experience_years"), payload.get("experience_years"))
    if experience is None:
        experience_years = 0.0
    else:
        try:
            experience_years = float(experience)
        except (TypeError, ValueError):
            raise InvalidPayloadError(
                f"Experience is not numeric: {experience!r}", field="analysis.experience_years"
            )
        if experience_years < 0:
            _log_warning(f"Negative experience_years={experience_years} treated as 0")
            experience_years = 0.0

    identifier = _first_present(resume_block.get("id"), payload.get("id"), resume_id)

    return {
        "id": "" if identifier is None else str(identifier),
        "email": str(
            _first_present(resume_block.get("user_email"), payload.get("user_email")) or ""
        ),
        "skills": normalize_string_list(
            _first_present(analysis.get("skills"), payload.get("skills")), "analysis.skills"
        ),
        "experience_years": experience_years,
        "uploaded_at": _first_present(resume_block.get("uploaded_at"), payload.get("uploaded_at")),
    }


def normalize_score_payload(payload: Any) -> Dict[str, Any]:
    """
    Normalize one score record payload.

    Returns:
        Dict with keys: job_id, job_title, company, the four score fields,
        missing_skills, recommendations, skills_required

    Raises:
        InvalidPayloadError: If the payload is not an object or a score is invalid
    """
    payload = _require_mapping(payload, "Score")
    job_post = payload.get("job_post") or {}
    job_post = _require_mapping(job_post, "Score 'job_post'")

    normalized: Dict[str, Any] = {
        "job_id": str(_first_present(payload.get("job_id"), job_post.get("id")) or ""),
        "job_title": str(_first_present(payload.get("job_title"), job_post.get("title")) or ""),
        "company": str(_first_present(payload.get("company"), job_post.get("company")) or ""),
    }
    for field in SCORE_FIELDS:
        normalized[field] = normalize_score(payload.get(field), field)

    normalized["missing_skills"] = normalize_string_list(
        payload.get("missing_skills"), "missing_skills"
    )
    normalized["recommendations"] = normalize_string_list(
        payload.get("recommendations"), "recommendations"
    )
    normalized["skills_required"] = normalize_string_list(
        job_post.get("skills_required"), "job_post.skills_required"
    )
    return normalized
