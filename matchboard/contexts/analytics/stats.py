"""Summary statistics over score records."""

from typing import Sequence

from matchboard.contexts.analytics.data_structures import AnalyticsSnapshot
from matchboard.contexts.intake.data_structures import ScoreRecord
from matchboard.utils.numbers import mean, round_half_up


def calculate_stats(records: Sequence[ScoreRecord]) -> AnalyticsSnapshot:
    """
    Compute job count, average, best and spread of the overall scores.

    Args:
        records: Score records for one resume

    Returns:
        AnalyticsSnapshot (all zeros when there are no records)
    """
    if not records:
        return AnalyticsSnapshot()

    overall = [record.overall_score for record in records]
    best = max(overall)
    worst = min(overall)

    return AnalyticsSnapshot(
        total_jobs=len(records),
        average_score=round_half_up(mean(overall)),
        best_score=round_half_up(best),
        improvement=round_half_up(best - worst),
    )
