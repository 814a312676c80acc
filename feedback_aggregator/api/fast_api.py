"""
FastAPI Router — Feedback list • Timeseries • AI summary • Demo reseed
======================================================================

Purpose
-------
Defines the HTTP API behind the dashboard:
- ``GET /api/feedback`` — filtered feedback list, newest first
- ``GET /api/feedback/summary`` — AI summary of recent feedback
- ``GET /api/feedback/timeseries`` — per-day sentiment counts
- ``POST /api/feedback/seed`` — replace all rows with the demo dataset

Key Notes
---------
- Query parameters are taken as raw strings and parsed leniently; malformed
  values fall back to defaults instead of producing a 422.
- No request state is kept between calls: every handler opens its own
  session (via `@transactional`) and, for summaries, its own model client.
"""

import logging
from typing import List, Optional, Union

from fastapi import APIRouter, Depends

from feedback_aggregator.api.models import (
    FeedbackRecord,
    SeedResult,
    SummaryResponse,
    TimeseriesBucket,
    TimeseriesPoint,
)
from feedback_aggregator.api.summarizer import FeedbackSummarizer
from feedback_aggregator.api.utils import parse_non_negative_int
from feedback_aggregator.database.core.funcs import (
    bucket_timeseries,
    get_timeseries,
    list_feedback,
    reseed_feedback,
    summarize_feedback,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/feedback", tags=["feedback"])
"""Router holding the feedback endpoints"""

DEFAULT_LIST_DAYS = 30
DEFAULT_LIST_LIMIT = 100
DEFAULT_SUMMARY_DAYS = 7
TRUTHY = {"1", "true", "yes", "on"}


def get_summarizer() -> FeedbackSummarizer:
    """Dependency providing a fresh summarizer per request."""
    return FeedbackSummarizer()


@router.get("", response_model=List[FeedbackRecord])
def get_feedback(
    days: Optional[str] = None,
    sentiment: Optional[str] = None,
    source: Optional[str] = None,
    limit: Optional[str] = None,
):
    """List feedback from the last `days` days (default 30), newest first.

    Optional `sentiment` and `source` keep exact matches only; unknown values
    return an empty list. `limit` caps the result (default 100).
    """
    return list_feedback(
        days=parse_non_negative_int(days, DEFAULT_LIST_DAYS),
        sentiment=sentiment,
        source=source,
        limit=parse_non_negative_int(limit, DEFAULT_LIST_LIMIT),
    )


@router.get("/summary", response_model=SummaryResponse, response_model_exclude_none=True)
def get_summary(
    days: Optional[str] = None,
    summarizer: FeedbackSummarizer = Depends(get_summarizer),
):
    """Summarize the last `days` days (default 7) of feedback with the chat model."""
    return summarize_feedback(
        days=parse_non_negative_int(days, DEFAULT_SUMMARY_DAYS),
        summarizer=summarizer,
    )


@router.get("/timeseries", response_model=Union[List[TimeseriesPoint], List[TimeseriesBucket]])
def get_feedback_timeseries(
    days: Optional[str] = None,
    sentiment: Optional[str] = None,
    grouped: Optional[str] = None,
):
    """Per-day sentiment counts for the last `days` days (default 30).

    `sentiment` is ``all`` or one sentiment. With ``grouped=true`` the flat
    rows are folded into one ``{date, positive, negative, neutral}`` bucket
    per date.
    """
    points = get_timeseries(
        days=parse_non_negative_int(days, DEFAULT_LIST_DAYS),
        sentiment=sentiment,
    )
    if grouped is not None and grouped.lower() in TRUTHY:
        return bucket_timeseries(points)
    return points


@router.post("/seed", response_model=SeedResult)
def seed_feedback():
    """Delete every record and insert a freshly generated demo dataset, atomically."""
    result = reseed_feedback()
    logger.info("Seed endpoint inserted %s records", result.inserted)
    return result
