"""
Mock Feedback Generator
=======================

Builds the synthetic demo dataset used to populate the dashboard.

Shape
-----
- 75 records: 30 positive, 26 negative, 19 neutral (~40/35/25).
- Each record lands uniformly within the last 30 days, except the first 8
  negative records, which are pinned to 10, 11 or 12 days ago (plus up to
  half a day of jitter). That cluster shows up as an "incident" bump of
  negative feedback in the timeseries chart.
- Hours fall between 08:00 and 22:00 UTC; minutes and seconds are uniform.
- Positive/negative scores are drawn from [0.7, 1.0], neutral from [0.4, 0.6].
- Content cycles through the template pool of the record's sentiment; the
  source is picked uniformly at random.

The same items feed both the online reseed (`database.core.funcs.reseed_feedback`)
and the offline SQL script (`render_insert_statements`).
"""

import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterator, List, Optional

from sqlalchemy import insert
from sqlalchemy.dialects import sqlite

from feedback_aggregator.database.entities.feedback import (
    TIMESTAMP_FORMAT,
    Feedback,
    Sentiment,
    Source,
)

SOURCES: List[Source] = list(Source)

FEEDBACK_TEMPLATES: Dict[Sentiment, List[str]] = {
    Sentiment.POSITIVE: [
        "Love the new dashboard redesign! It's so much easier to navigate now.",
        "Great support response time - got my issue resolved within an hour.",
        "The API documentation is really well written, made integration a breeze.",
        "Performance has been rock solid for us this month. Great work!",
        "Just migrated from a competitor and the onboarding experience was fantastic.",
        "The new analytics features are exactly what we needed. Thank you!",
        "Your team's response on the forum was incredibly helpful.",
        "Impressed with the uptime - haven't had a single outage in 6 months.",
        "The CLI tool is a joy to use. Very intuitive design.",
        "Pricing is fair for the value we're getting. Happy customer here.",
        "The new caching features have cut our load times in half.",
        "Really appreciate the transparent changelog and communication.",
        "Setup was surprisingly easy - had everything running in under 30 minutes.",
        "The webhooks feature works flawlessly. Exactly what we needed.",
        "Your free tier is generous enough to let us properly evaluate the product.",
        "The mobile experience has improved dramatically. Nice work!",
        "Edge computing support has been a game changer for our latency issues.",
        "Love the real-time monitoring dashboard. Very actionable insights.",
    ],
    Sentiment.NEGATIVE: [
        "The site has been painfully slow the past few days. Pages take forever to load.",
        "Getting a 500 error when trying to access my account settings.",
        "Your pricing is too expensive for small teams. Need more affordable options.",
        "Documentation is outdated - half the code examples don't work anymore.",
        "Been waiting 3 days for a support response. This is unacceptable.",
        "The new UI update broke our custom integration. No warning given.",
        "SSL certificate renewal failed and took our site down for 2 hours.",
        "Rate limiting is way too aggressive. Keeps blocking legitimate traffic.",
        "The migration tool lost some of our data. Very concerning.",
        "Dashboard keeps timing out when loading analytics for large sites.",
        "API response times have degraded significantly since the last update.",
        "Your billing system charged us twice this month. Still waiting for refund.",
        "The deploy process failed silently - no error messages to debug.",
        "Search functionality is broken - returns irrelevant results.",
        "Mobile app crashes constantly on Android. Please fix.",
        "Lost 4 hours debugging because error messages are so cryptic.",
    ],
    Sentiment.NEUTRAL: [
        "How do I configure custom headers for my workers?",
        "Is there a way to export analytics data to CSV?",
        "What's the difference between the Pro and Business plans?",
        "Looking for documentation on the new routing features.",
        "Can you clarify the fair usage policy for bandwidth?",
        "When is the next maintenance window scheduled?",
        "Wondering if you support custom domains with wildcard certificates.",
        "Any plans to add GraphQL support to the API?",
        "How does the caching behavior work with query parameters?",
        "What regions are available for data residency?",
        "Could you provide more details about your SOC 2 compliance?",
        "Is there a status page I can subscribe to for updates?",
    ],
}

SENTIMENT_COUNTS: Dict[Sentiment, int] = {
    Sentiment.POSITIVE: 30,
    Sentiment.NEGATIVE: 26,
    Sentiment.NEUTRAL: 19,
}

WINDOW_DAYS = 30
SPIKE_DAYS = (10, 11, 12)
SPIKE_RECORDS = 8
SPIKE_JITTER_DAYS = 0.5
FIRST_HOUR, LAST_HOUR = 8, 21

SCORE_RANGES = {
    Sentiment.POSITIVE: (0.7, 1.0),
    Sentiment.NEGATIVE: (0.7, 1.0),
    Sentiment.NEUTRAL: (0.4, 0.6),
}


@dataclass(frozen=True)
class GeneratedFeedback:
    """One synthetic feedback row, plus the offset it was placed at."""

    source: Source
    content: str
    timestamp: str
    sentiment: Sentiment
    sentiment_score: float
    days_ago: float

    def to_entity(self) -> Feedback:
        return Feedback(
            source=self.source,
            content=self.content,
            timestamp=self.timestamp,
            sentiment=self.sentiment,
            sentiment_score=self.sentiment_score,
        )


def generate_timestamp(days_ago: float, now: datetime, rng: random.Random) -> str:
    """
    Place a record `days_ago` days before `now`, then move it to a random
    waking-hours time on that calendar day.

    A time that would land after `now` (only possible on the day of `now`)
    moves to the same time on the previous day, so stamps stay in waking
    hours and never lie in the future.
    """
    moment = now - timedelta(days=days_ago)
    moment = moment.replace(
        hour=rng.randint(FIRST_HOUR, LAST_HOUR),
        minute=rng.randint(0, 59),
        second=rng.randint(0, 59),
        microsecond=0,
    )
    if moment > now:
        moment -= timedelta(days=1)
    return moment.strftime(TIMESTAMP_FORMAT)


def pick_days_ago(sentiment: Sentiment, index: int, rng: random.Random) -> float:
    if sentiment is Sentiment.NEGATIVE and index < SPIKE_RECORDS:
        return SPIKE_DAYS[index % len(SPIKE_DAYS)] + rng.random() * SPIKE_JITTER_DAYS
    return rng.random() * WINDOW_DAYS


def generate_feedback_items(
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> List[GeneratedFeedback]:
    """
    Generate the full demo dataset.

    Args:
        rng: Random source; a fresh unseeded `random.Random` when omitted.
        now: Generation time (UTC); defaults to the current time.

    Returns:
        list[GeneratedFeedback]: positive records first, then negative, then neutral.
    """
    rng = rng or random.Random()
    now = now or datetime.now(timezone.utc)
    items = []

    for sentiment, count in SENTIMENT_COUNTS.items():
        pool = FEEDBACK_TEMPLATES[sentiment]
        low, high = SCORE_RANGES[sentiment]
        for i in range(count):
            days_ago = pick_days_ago(sentiment, i, rng)
            items.append(
                GeneratedFeedback(
                    source=rng.choice(SOURCES),
                    content=pool[i % len(pool)],
                    timestamp=generate_timestamp(days_ago, now, rng),
                    sentiment=sentiment,
                    sentiment_score=round(rng.uniform(low, high), 2),
                    days_ago=days_ago,
                )
            )

    return items


def insert_statement(item: GeneratedFeedback) -> str:
    """Render one item as a literal `INSERT` statement for SQLite."""
    stmt = insert(Feedback.__table__).values(
        source=item.source,
        content=item.content,
        timestamp=item.timestamp,
        sentiment=item.sentiment,
        sentiment_score=item.sentiment_score,
    )
    compiled = stmt.compile(dialect=sqlite.dialect(), compile_kwargs={"literal_binds": True})
    return f"{compiled};"


def render_insert_statements(
    items: List[GeneratedFeedback],
    generated_at: Optional[datetime] = None,
) -> Iterator[str]:
    """
    Yield the lines of an SQL script that loads `items` out-of-band.

    The script opens with a comment header and ends with a
    ``-- Total items: N`` line.
    """
    generated_at = generated_at or datetime.now(timezone.utc)
    yield "-- Mock feedback data for Feedback Aggregator Dashboard"
    yield f"-- Generated: {generated_at.isoformat()}"
    yield ""
    for item in items:
        yield insert_statement(item)
    yield ""
    yield f"-- Total items: {len(items)}"
