"""
Service-layer operations for the feedback dashboard.

Functions touching the store are wrapped with the `@transactional` decorator,
which manages SQLAlchemy sessions and transactions automatically. Each of them
accepts (and uses) an injected `session: Session` provided by the decorator,
and converts ORM rows to API models before the session closes.

Filter values arrive as raw strings. A sentiment or source that names no
member of its enumeration matches nothing: the operation returns an empty
result instead of raising.
"""

import logging
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from feedback_aggregator.api.models import (
    FeedbackRecord,
    SeedResult,
    SummaryResponse,
    TimeseriesBucket,
    TimeseriesPoint,
)
from feedback_aggregator.api.summarizer import FeedbackSummarizer, build_summary_prompt
from feedback_aggregator.api.utils import optional_enum
from feedback_aggregator.database.daos.feedback_dao import FeedbackDao
from feedback_aggregator.database.entities.feedback import Sentiment, Source
from feedback_aggregator.database.helpers.transactionManagement import transactional
from feedback_aggregator.seed_generator import GeneratedFeedback, generate_feedback_items

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No feedback data available for the selected period."
SUMMARY_ITEM_LIMIT = 50
ALL_SENTIMENTS = "all"


@transactional
def list_feedback(
    session: Session,
    days: int = 30,
    sentiment: Optional[str] = None,
    source: Optional[str] = None,
    limit: int = 100,
) -> List[FeedbackRecord]:
    """
    List feedback in the last `days` days, newest first.

    Parameters
    ----------
    session : Session
        Active SQLAlchemy session (injected by @transactional).
    days : int
        Lookback window in days.
    sentiment : str, optional
        Exact sentiment to keep.
    source : str, optional
        Exact source channel to keep.
    limit : int
        Maximum number of records.

    Returns
    -------
    list[FeedbackRecord]
        Empty when a filter value is not a known sentiment/source.
    """
    try:
        sentiment_filter = optional_enum(Sentiment, sentiment)
        source_filter = optional_enum(Source, source)
    except ValueError:
        logger.info("Unknown feedback filter sentiment=%r source=%r", sentiment, source)
        return []

    rows = FeedbackDao().fetchFeedback(
        session,
        days=days,
        sentiment=sentiment_filter,
        source=source_filter,
        limit=limit,
    )
    return [FeedbackRecord.model_validate(row) for row in rows]


@transactional
def get_timeseries(
    session: Session,
    days: int = 30,
    sentiment: Optional[str] = None,
) -> List[TimeseriesPoint]:
    """
    Count feedback per (date, sentiment) in the last `days` days.

    `sentiment` may be ``"all"`` (or empty) for every sentiment.

    Returns
    -------
    list[TimeseriesPoint]
        Ordered by date ascending.
    """
    if sentiment == ALL_SENTIMENTS:
        sentiment = None
    try:
        sentiment_filter = optional_enum(Sentiment, sentiment)
    except ValueError:
        logger.info("Unknown timeseries sentiment %r", sentiment)
        return []

    rows = FeedbackDao().fetchTimeseries(session, days=days, sentiment=sentiment_filter)
    return [TimeseriesPoint(**row._mapping) for row in rows]


def bucket_timeseries(points: Iterable) -> List[TimeseriesBucket]:
    """
    Group flat (date, sentiment, count) points into one bucket per date.

    Every date that appears gets all three sentiments; the ones absent from
    `points` are zero.

    Args:
        points: `TimeseriesPoint` objects, or `(date, sentiment, count)` tuples.

    Returns:
        list[TimeseriesBucket]: Ordered by date ascending.
    """
    buckets: Dict[str, Dict[str, int]] = {}
    for point in points:
        if isinstance(point, tuple):
            date, sentiment, count = point
        else:
            date, sentiment, count = point.date, point.sentiment, point.count
        sentiment = Sentiment(sentiment)
        counts = buckets.setdefault(date, {s.value: 0 for s in Sentiment})
        counts[sentiment.value] += count

    return [TimeseriesBucket(date=date, **buckets[date]) for date in sorted(buckets)]


@transactional
def fetch_summary_rows(session: Session, days: int = 7) -> List[dict]:
    """Most recent (at most 50) rows of the window, as plain dicts."""
    rows = FeedbackDao().fetchRecentForSummary(session, days=days, limit=SUMMARY_ITEM_LIMIT)
    return [
        {"source": row.source.value, "content": row.content, "sentiment": row.sentiment.value}
        for row in rows
    ]


def summarize_feedback(days: int = 7, summarizer: Optional[FeedbackSummarizer] = None) -> SummaryResponse:
    """
    Summarize recent feedback with the hosted chat model.

    Parameters
    ----------
    days : int
        Lookback window in days.
    summarizer : FeedbackSummarizer, optional
        Model wrapper; a default one is built when omitted.

    Returns
    -------
    SummaryResponse
        The no-data message (and no model call) when the window is empty,
        otherwise the model text with `itemCount` and `days`.

    Notes
    -----
    - The store session is closed before the model is called.
    - Model errors propagate to the caller.
    """
    rows = fetch_summary_rows(days=days)
    if not rows:
        return SummaryResponse(summary=NO_DATA_MESSAGE)

    summarizer = summarizer or FeedbackSummarizer()
    summary = summarizer.summarize(build_summary_prompt(rows, days=days))
    return SummaryResponse(summary=summary, itemCount=len(rows), days=days)


@transactional
def reseed_feedback(session: Session, items: Optional[List[GeneratedFeedback]] = None) -> SeedResult:
    """
    Replace every stored record with a freshly generated demo dataset.

    The delete and the inserts share one transaction: if any insert fails,
    the rollback leaves the previous rows untouched and the error propagates.

    Parameters
    ----------
    session : Session
        Active SQLAlchemy session (injected by @transactional).
    items : list[GeneratedFeedback], optional
        Pre-generated items; generated on the fly when omitted.

    Returns
    -------
    SeedResult
        `success=True` and the number of inserted rows.
    """
    items = generate_feedback_items() if items is None else items
    dao = FeedbackDao()
    removed = dao.deleteAll(session)
    inserted = dao.createFeedbackBatch(session, [item.to_entity() for item in items])
    logger.info("Reseeded feedback table: removed %s rows, inserted %s", removed, inserted)
    return SeedResult(success=True, inserted=inserted)
