"""
Score Distribution

Buckets overall scores into the fixed performance tiers from defaults.py.

Tier bounds are integers (0-40, 41-60, 61-80, 81-100), so each score is
rounded half-up before classification. This places every score in [0, 100]
in exactly one tier: 40.4 counts as Poor, 40.5 as Fair.
"""

from dataclasses import replace
from typing import Sequence, Tuple

from matchboard.contexts.analytics.data_structures import ScoreDistributionBucket
from matchboard.contexts.analytics.defaults import empty_buckets
from matchboard.contexts.intake.data_structures import ScoreRecord
from matchboard.utils.numbers import round_half_up


def bucket_scores(records: Sequence[ScoreRecord]) -> Tuple[ScoreDistributionBucket, ...]:
    """
    Count score records per performance tier.

    Args:
        records: Score records for one resume

    Returns:
        Non-empty tiers in tier order (Poor -> Excellent); empty when there
        are no records
    """
    if not records:
        return ()

    buckets = empty_buckets()
    counts = [0] * len(buckets)

    for record in records:
        score = round_half_up(record.overall_score)
        for index, bucket in enumerate(buckets):
            if bucket.contains(score):
                counts[index] += 1

    return tuple(
        replace(bucket, count=count) for bucket, count in zip(buckets, counts) if count > 0
    )
