"""Ranking of skills the analyzed jobs require but the resume lacks."""

from typing import Dict, Optional, Sequence, Tuple

from matchboard.contexts.analytics.data_structures import MissingSkillEntry
from matchboard.contexts.analytics.defaults import MISSING_SKILLS_LIMIT
from matchboard.contexts.intake.data_structures import ScoreRecord


def rank_missing_skills(
    records: Sequence[ScoreRecord], limit: Optional[int] = MISSING_SKILLS_LIMIT
) -> Tuple[MissingSkillEntry, ...]:
    """
    Tally missing skills across all score records.

    Every occurrence counts, including repeats within a single record's
    missing_skills list.

    Args:
        records: Score records for one resume
        limit: Maximum number of entries (None for the full ranking)

    Returns:
        Entries sorted by count (descending), ties in first-seen order
    """
    counts: Dict[str, int] = {}
    for record in records:
        for skill in record.missing_skills or ():
            counts[skill] = counts.get(skill, 0) + 1

    # sorted() is stable, so equal counts keep first-seen order
    ranked = sorted(counts.items(), key=lambda x: x[1], reverse=True)
    return tuple(MissingSkillEntry(name=skill, job_count=count) for skill, count in ranked[:limit])
