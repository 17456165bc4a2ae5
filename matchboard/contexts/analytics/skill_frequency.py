"""
Skill Frequency Analysis

Ranks resume skills by how often the analyzed jobs ask for them.

A resume skill is relevant to a required skill when either name contains the
other, ignoring case ("React" ~ "react.js", "Machine Learning" ~ "learning").
Every (required skill, resume skill) match adds one to the resume skill's
count, and the count is reported as a percentage of all analyzed jobs.
"""

from typing import Dict, Sequence, Tuple

from matchboard.contexts.analytics.data_structures import SkillFrequencyEntry
from matchboard.contexts.analytics.defaults import FALLBACK_SKILL_FREQUENCY, TOP_SKILLS_LIMIT
from matchboard.contexts.analytics.logger import _log_debug
from matchboard.contexts.intake.data_structures import ScoreRecord
from matchboard.utils.numbers import round_half_up


def skills_match(resume_skill: str, required_skill: str) -> bool:
    """Case-insensitive, bidirectional substring test."""
    resume_lower = resume_skill.lower()
    required_lower = required_skill.lower()
    return resume_lower in required_lower or required_lower in resume_lower


def count_skill_matches(
    resume_skills: Sequence[str], records: Sequence[ScoreRecord]
) -> Dict[str, int]:
    """
    Count matches between resume skills and each job's required skills.

    Records without job metadata or required skills contribute nothing.

    Returns:
        Dict mapping resume skill -> match count (only skills with matches)
    """
    counts: Dict[str, int] = {}
    for record in records:
        required_skills = record.job_post.skills_required if record.job_post else ()
        for required_skill in required_skills or ():
            for skill in resume_skills:
                if skills_match(skill, required_skill):
                    counts[skill] = counts.get(skill, 0) + 1
    return counts


def rank_skill_frequency(
    resume_skills: Sequence[str],
    records: Sequence[ScoreRecord],
    limit: int = TOP_SKILLS_LIMIT,
) -> Tuple[SkillFrequencyEntry, ...]:
    """
    Rank resume skills by relevance to the analyzed jobs.

    Falls back to the first `limit` resume skills at 100% when no job data
    matched any resume skill (including when there are no records at all).

    Args:
        resume_skills: Skills from the resume, in resume order
        records: Score records carrying the jobs' required skills
        limit: Maximum number of entries

    Returns:
        Entries sorted by frequency (descending), ties in resume order
    """
    counts = count_skill_matches(resume_skills, records)

    if not counts:
        _log_debug("No skill matches against job data; using resume skills as-is")
        return tuple(
            SkillFrequencyEntry(name=skill, frequency_percent=FALLBACK_SKILL_FREQUENCY)
            for skill in list(resume_skills)[:limit]
        )

    total_jobs = len(records)
    resume_order: Dict[str, int] = {}
    for index, skill in enumerate(resume_skills):
        resume_order.setdefault(skill, index)

    # A skill matching several requirements of one job can exceed 100%
    entries = [
        SkillFrequencyEntry(
            name=skill,
            frequency_percent=min(100, round_half_up(count / total_jobs * 100)),
        )
        for skill, count in counts.items()
    ]
    entries.sort(key=lambda entry: (-entry.frequency_percent, resume_order[entry.name]))

    _log_debug(f"Matched {len(entries)} resume skills across {total_jobs} jobs")
    return tuple(entries[:limit])
