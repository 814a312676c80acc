"""
Pydantic models used for response validation and API data contracts.

Each class defines the structure of data returned by the feedback endpoints,
ensuring validation and automatic OpenAPI schema generation.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from feedback_aggregator.database.entities.feedback import Sentiment, Source


class FeedbackRecord(BaseModel):
    """
    One stored feedback record, as returned by `GET /api/feedback`.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    """Identifier assigned by the store."""
    source: Source
    """Channel the feedback came from."""
    content: str
    """Feedback body."""
    timestamp: str = Field(..., description="UTC timestamp, `YYYY-MM-DD HH:MM:SS`.", examples=["2026-10-01 14:32:05"])
    """When the feedback was produced."""
    sentiment: Sentiment
    """positive, negative or neutral."""
    sentiment_score: float = Field(..., ge=0, le=1)
    """Sentiment confidence/intensity."""


class TimeseriesPoint(BaseModel):
    """
    Count of feedback for one (date, sentiment) pair.
    """
    date: str = Field(..., description="Calendar date, `YYYY-MM-DD`.", examples=["2026-10-01"])
    sentiment: Sentiment
    count: int


class TimeseriesBucket(BaseModel):
    """
    All sentiment counts for one date; missing sentiments are zero.
    """
    model_config = ConfigDict(extra="forbid")

    date: str
    positive: int = 0
    negative: int = 0
    neutral: int = 0


class SummaryResponse(BaseModel):
    """
    AI summary of recent feedback.

    `itemCount` and `days` are omitted when the window held no feedback.
    """
    summary: str
    """Model output (opaque text) or the no-data message."""
    itemCount: Optional[int] = None
    """Number of feedback items included in the prompt."""
    days: Optional[int] = None
    """Lookback window the summary covers."""


class SeedResult(BaseModel):
    """
    Outcome of a reseed.
    """
    success: bool
    inserted: int
