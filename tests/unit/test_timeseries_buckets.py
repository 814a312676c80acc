"""Tests for grouping flat timeseries rows into per-date buckets."""
from feedback_aggregator.api.models import TimeseriesPoint
from feedback_aggregator.database.core.funcs import bucket_timeseries


def test_missing_sentiments_are_zero_filled():
    buckets = bucket_timeseries([("2026-10-01", "positive", 3), ("2026-10-01", "negative", 1)])

    assert len(buckets) == 1
    assert buckets[0].model_dump() == {"date": "2026-10-01", "positive": 3, "negative": 1, "neutral": 0}


def test_buckets_are_sorted_by_date():
    points = [
        TimeseriesPoint(date="2026-10-03", sentiment="neutral", count=2),
        TimeseriesPoint(date="2026-10-01", sentiment="positive", count=1),
        TimeseriesPoint(date="2026-10-02", sentiment="negative", count=4),
    ]

    buckets = bucket_timeseries(points)

    assert [bucket.date for bucket in buckets] == ["2026-10-01", "2026-10-02", "2026-10-03"]
    assert buckets[1].negative == 4
    assert buckets[1].positive == 0 and buckets[1].neutral == 0


def test_every_bucket_has_all_three_sentiments():
    buckets = bucket_timeseries([("2026-10-05", "neutral", 7)])

    assert set(buckets[0].model_dump()) == {"date", "positive", "negative", "neutral"}


def test_empty_input():
    assert bucket_timeseries([]) == []
