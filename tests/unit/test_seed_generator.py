"""Tests for the mock feedback generator."""
import random
from collections import Counter
from datetime import datetime, timezone

import pytest
from sqlalchemy import create_engine, text

from feedback_aggregator.database.config.connection_engine import metadata
from feedback_aggregator.database.entities.feedback import Sentiment, Source
from feedback_aggregator.seed_generator import (
    FEEDBACK_TEMPLATES,
    SPIKE_RECORDS,
    generate_feedback_items,
    generate_timestamp,
    render_insert_statements,
)

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def items():
    return generate_feedback_items(rng=random.Random(1234), now=NOW)


class TestDistribution:
    """Shape of the generated dataset."""

    @pytest.mark.parametrize("seed", [0, 1, 7, 99, 2026])
    def test_sentiment_counts_are_fixed(self, seed):
        generated = generate_feedback_items(rng=random.Random(seed), now=NOW)

        counts = Counter(item.sentiment for item in generated)
        assert counts == {Sentiment.POSITIVE: 30, Sentiment.NEGATIVE: 26, Sentiment.NEUTRAL: 19}
        assert len(generated) == 75

    @pytest.mark.parametrize("seed", [0, 1, 7, 99, 2026])
    def test_scores_follow_sentiment(self, seed):
        for item in generate_feedback_items(rng=random.Random(seed), now=NOW):
            if item.sentiment is Sentiment.NEUTRAL:
                assert 0.4 <= item.sentiment_score <= 0.6
            else:
                assert 0.7 <= item.sentiment_score <= 1.0

    @pytest.mark.parametrize("seed", [0, 1, 7, 99, 2026])
    def test_negative_spike_window(self, seed):
        negatives = [
            item for item in generate_feedback_items(rng=random.Random(seed), now=NOW)
            if item.sentiment is Sentiment.NEGATIVE
        ]

        in_spike = [item for item in negatives if 10 <= item.days_ago <= 12.5]
        assert len(in_spike) >= SPIKE_RECORDS
        assert all(10 <= item.days_ago <= 12.5 for item in negatives[:SPIKE_RECORDS])

    def test_spike_records_land_on_spike_dates(self, items):
        negatives = [item for item in items if item.sentiment is Sentiment.NEGATIVE]

        dates = {item.timestamp[:10] for item in negatives[:SPIKE_RECORDS]}
        assert dates <= {"2026-10-07", "2026-10-08", "2026-10-09"}

    def test_days_ago_within_window(self, items):
        assert all(0 <= item.days_ago < 30 for item in items)


class TestContent:
    """Templates, sources and timestamps."""

    def test_templates_cycle_by_index(self, items):
        positives = [item for item in items if item.sentiment is Sentiment.POSITIVE]
        pool = FEEDBACK_TEMPLATES[Sentiment.POSITIVE]

        assert [item.content for item in positives[: len(pool)]] == pool
        assert positives[len(pool)].content == pool[0]

    def test_content_comes_from_own_pool(self, items):
        for item in items:
            assert item.content in FEEDBACK_TEMPLATES[item.sentiment]

    def test_sources_are_enum_members(self, items):
        assert all(isinstance(item.source, Source) for item in items)

    def test_timestamps_in_waking_hours_and_not_in_future(self, items):
        for item in items:
            moment = datetime.strptime(item.timestamp, "%Y-%m-%d %H:%M:%S").replace(tzinfo=timezone.utc)
            assert moment <= NOW
            assert 8 <= moment.hour < 22

    @pytest.mark.parametrize("seed", range(20))
    @pytest.mark.parametrize("now", [
        datetime(2026, 10, 19, 0, 5, 0, tzinfo=timezone.utc),
        datetime(2026, 10, 19, 7, 30, 0, tzinfo=timezone.utc),
        datetime(2026, 10, 19, 15, 45, 0, tzinfo=timezone.utc),
        datetime(2026, 10, 19, 23, 59, 0, tzinfo=timezone.utc),
    ])
    def test_waking_hours_hold_at_any_generation_time(self, seed, now):
        for item in generate_feedback_items(rng=random.Random(seed), now=now):
            moment = datetime.strptime(item.timestamp, "%Y-%m-%d %H:%M:%S").replace(tzinfo=timezone.utc)
            assert moment <= now
            assert 8 <= moment.hour < 22

    def test_future_time_moves_to_previous_day(self):
        early = datetime(2026, 10, 19, 7, 0, 0, tzinfo=timezone.utc)

        stamp = generate_timestamp(0.0, early, random.Random(3))

        assert stamp.startswith("2026-10-18 ")
        assert 8 <= int(stamp[11:13]) < 22

    def test_early_generation_does_not_repeat_one_stamp(self):
        early = datetime(2026, 10, 19, 7, 30, 0, tzinfo=timezone.utc)
        stamps = [generate_timestamp(0.01, early, random.Random(seed)) for seed in range(10)]

        assert "2026-10-19 07:30:00" not in stamps
        assert len(set(stamps)) > 1

    def test_same_seed_same_dataset(self):
        first = generate_feedback_items(rng=random.Random(42), now=NOW)
        second = generate_feedback_items(rng=random.Random(42), now=NOW)
        assert first == second


class TestInsertScript:
    """Offline SQL rendering."""

    def test_script_layout(self, items):
        lines = list(render_insert_statements(items, generated_at=NOW))

        assert lines[0] == "-- Mock feedback data for Feedback Aggregator Dashboard"
        assert lines[1] == f"-- Generated: {NOW.isoformat()}"
        assert lines[-1] == "-- Total items: 75"
        inserts = [line for line in lines if line.startswith("INSERT INTO feedback")]
        assert len(inserts) == 75
        assert all(line.endswith(";") for line in inserts)

    def test_quotes_are_escaped(self, items):
        script = "\n".join(render_insert_statements(items, generated_at=NOW))
        assert "It''s so much easier" in script

    def test_enum_values_are_rendered(self, items):
        first = next(line for line in render_insert_statements(items) if line.startswith("INSERT"))
        assert "'positive'" in first
        assert any(f"'{source.value}'" in first for source in Source)

    def test_script_loads_into_sqlite(self, items, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path / 'offline.db'}")
        metadata.create_all(engine)

        with engine.begin() as conn:
            for line in render_insert_statements(items):
                if line.startswith("INSERT"):
                    conn.exec_driver_sql(line)

        with engine.connect() as conn:
            rows = conn.execute(
                text("SELECT sentiment, COUNT(*) FROM feedback GROUP BY sentiment")
            ).all()
        assert dict(rows) == {"positive": 30, "negative": 26, "neutral": 19}
