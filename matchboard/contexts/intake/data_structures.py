"""
Intake data structures.

Canonical, immutable representations of the data the analytics context
consumes: a resume profile and the per-job score records computed for it.

Instances are built fresh on every fetch and never mutated; sequences are
stored as tuples so a snapshot can be shared (and hashed) safely.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Optional, Tuple

from matchboard.contexts.intake.normalizer import (
    normalize_resume_payload,
    normalize_score_payload,
)
from matchboard.utils.timestamp import parse_timestamp


@dataclass(frozen=True)
class JobPost:
    """
    Job metadata embedded in a score record.

    Attributes:
        skills_required: Skill names the job posting asks for (empty if unknown)
    """

    skills_required: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ScoreRecord:
    """
    Result of matching one resume against one job posting.

    All four scores are percentages in [0, 100].

    Attributes:
        job_id: Identifier of the scored job
        job_title: Job title as listed
        company: Hiring company
        overall_score: Combined compatibility score
        ats_score: Applicant tracking system compatibility
        skill_match_score: Share of required skills present in the resume
        experience_score: Experience fit
        missing_skills: Required skills absent from the resume (may repeat)
        recommendations: Advice supplied by the scoring service for this job
        job_post: Job metadata (required skills)
    """

    job_id: str = ""
    job_title: str = ""
    company: str = ""
    overall_score: float = 0.0
    ats_score: float = 0.0
    skill_match_score: float = 0.0
    experience_score: float = 0.0
    missing_skills: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()
    job_post: JobPost = field(default_factory=JobPost)

    @classmethod
    def from_payload(cls, payload: Any) -> "ScoreRecord":
        """
        Build a score record from a raw scoring payload.

        Raises:
            InvalidPayloadError: If the payload is malformed
        """
        data = normalize_score_payload(payload)
        skills_required = data.pop("skills_required")
        return cls(**data, job_post=JobPost(skills_required=skills_required))


@dataclass(frozen=True)
class ResumeProfile:
    """
    Resume as seen by analytics: identity, skills and experience.

    Attributes:
        id: Resume identifier
        email: Owner's email address
        skills: Extracted skill names, in extraction order
        experience_years: Years of professional experience (non-negative)
        uploaded_at: Upload time, if known
    """

    id: str
    email: str = ""
    skills: Tuple[str, ...] = ()
    experience_years: float = 0.0
    uploaded_at: Optional[datetime] = None

    @classmethod
    def from_payload(cls, payload: Any, resume_id: Optional[str] = None) -> "ResumeProfile":
        """
        Build a profile from a raw resume analysis payload.

        Args:
            payload: Raw payload (either field layout, see normalizer)
            resume_id: Identifier used to request the payload

        Raises:
            InvalidPayloadError: If the payload is malformed
        """
        data = normalize_resume_payload(payload, resume_id=resume_id)
        data["uploaded_at"] = parse_timestamp(data["uploaded_at"])
        return cls(**data)


@dataclass(frozen=True)
class DashboardSnapshot:
    """
    Immutable input to the analytics context.

    Pairs a resume profile with the score records fetched for it. The
    analytics context derives every view from this object alone.
    """

    profile: ResumeProfile
    records: Tuple[ScoreRecord, ...] = ()

    @classmethod
    def of(cls, profile: ResumeProfile, records: Iterable[ScoreRecord]) -> "DashboardSnapshot":
        return cls(profile=profile, records=tuple(records))
