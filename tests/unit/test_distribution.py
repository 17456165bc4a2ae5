"""Unit tests for score distribution buckets."""

import pytest

from matchboard.contexts.analytics import bucket_scores
from matchboard.contexts.analytics.defaults import SCORE_BUCKET_DEFINITIONS
from matchboard.contexts.intake import ScoreRecord


def _records(*overall_scores):
    return [ScoreRecord(overall_score=s) for s in overall_scores]


def _counts(buckets):
    return {bucket.label: bucket.count for bucket in buckets}


@pytest.mark.unit
def test_empty_records_give_no_buckets():
    assert bucket_scores([]) == ()


@pytest.mark.unit
def test_one_score_per_tier():
    buckets = bucket_scores(_records(35, 55, 75, 95))

    assert [b.label for b in buckets] == ["Poor", "Fair", "Good", "Excellent"]
    assert [b.count for b in buckets] == [1, 1, 1, 1]


@pytest.mark.unit
def test_bucket_metadata_matches_definitions():
    buckets = bucket_scores(_records(35, 55, 75, 95))

    for bucket, (label, low, high, description) in zip(buckets, SCORE_BUCKET_DEFINITIONS):
        assert bucket.label == label
        assert (bucket.min_score, bucket.max_score) == (low, high)
        assert bucket.description == description


@pytest.mark.unit
def test_empty_tiers_are_omitted():
    buckets = bucket_scores(_records(90, 99, 10))
    assert _counts(buckets) == {"Poor": 1, "Excellent": 2}


@pytest.mark.unit
@pytest.mark.parametrize(
    "score,label",
    [
        (0, "Poor"),
        (40, "Poor"),
        (41, "Fair"),
        (60, "Fair"),
        (61, "Good"),
        (80, "Good"),
        (81, "Excellent"),
        (100, "Excellent"),
    ],
)
def test_integer_boundaries_are_inclusive(score, label):
    assert _counts(bucket_scores(_records(score))) == {label: 1}


@pytest.mark.unit
@pytest.mark.parametrize(
    "score,label",
    [
        (40.4, "Poor"),
        (40.5, "Fair"),
        (60.49, "Fair"),
        (60.5, "Good"),
        (80.5, "Excellent"),
    ],
)
def test_fractional_scores_between_tiers_are_rounded(score, label):
    """Scores in the gaps between integer bounds land in exactly one tier."""
    assert _counts(bucket_scores(_records(score))) == {label: 1}


@pytest.mark.unit
def test_range_label():
    (bucket,) = bucket_scores(_records(50))
    assert bucket.range_label == "Fair (41-60%)"
