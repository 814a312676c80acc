"""
Feedback ORM Model
==================

The ``Feedback`` ORM model represents one piece of customer feedback captured
from an external channel (support desk, chat, issue tracker, ...).

Table
-----
- SQLite table: ``feedback`` (SQLAlchemy 2.0 typed mappings)

Key Features
~~~~~~~~~~~~
- Integer surrogate primary key assigned by the store
- Closed enumerations for ``source`` and ``sentiment`` (stored as their values,
  validated on write and guarded by a CHECK constraint)
- ``timestamp`` stored as a ``YYYY-MM-DD HH:MM:SS`` UTC string so it compares
  lexicographically against SQLite's ``datetime('now', ...)``
- ``sentiment_score`` in [0, 1]

Records are immutable once written. The only removal path is the full-table
clear performed before a reseed.
"""

import enum
from datetime import datetime

from sqlalchemy import CheckConstraint, Enum, Float, Integer, String, TEXT
from sqlalchemy.orm import Mapped, mapped_column

from feedback_aggregator.database.config.connection_engine import declarativeBase

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
"""Storage format of `Feedback.timestamp` (UTC, second precision)."""


class Sentiment(str, enum.Enum):
    """Sentiment classes a feedback record can carry."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class Source(str, enum.Enum):
    """Channels feedback is collected from."""

    SUPPORT_TICKET = "Support Ticket"
    DISCORD = "Discord"
    GITHUB_ISSUE = "GitHub Issue"
    EMAIL = "Email"
    TWITTER = "Twitter"
    COMMUNITY_FORUM = "Community Forum"


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Feedback(declarativeBase):
    """
    ORM model for the `feedback` table.

    Attributes
    ----------
    id : int
        Surrogate primary key, assigned on insert.
    source : Source
        Channel the feedback came from.
    content : str
        Free-text body.
    timestamp : str
        Moment the feedback was produced, ``YYYY-MM-DD HH:MM:SS`` in UTC.
    sentiment : Sentiment
        positive, negative or neutral.
    sentiment_score : float
        Confidence/intensity of the sentiment, in [0, 1].
    """

    __tablename__ = "feedback"
    __table_args__ = (
        CheckConstraint(
            "sentiment_score >= 0 AND sentiment_score <= 1",
            name="ck_feedback_sentiment_score_range",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    """Primary key assigned by the store."""

    source: Mapped[Source] = mapped_column(
        Enum(
            Source,
            name="feedback_source",
            native_enum=False,
            create_constraint=True,
            validate_strings=True,
            values_callable=_enum_values,
        ),
        nullable=False,
    )
    """Origin channel."""

    content: Mapped[str] = mapped_column(TEXT, nullable=False)
    """Feedback body."""

    timestamp: Mapped[str] = mapped_column(String(19), nullable=False, index=True)
    """UTC timestamp string, sortable."""

    sentiment: Mapped[Sentiment] = mapped_column(
        Enum(
            Sentiment,
            name="feedback_sentiment",
            native_enum=False,
            create_constraint=True,
            validate_strings=True,
            values_callable=_enum_values,
        ),
        nullable=False,
    )
    """Sentiment class."""

    sentiment_score: Mapped[float] = mapped_column(Float, nullable=False)
    """Score in [0, 1]; high for polarized sentiment, mid-range for neutral."""

    def __init__(
        self,
        source: Source,
        content: str,
        timestamp,
        sentiment: Sentiment,
        sentiment_score: float,
    ):
        """
        Initialize a new Feedback object.

        Parameters
        ----------
        source : Source | str
            Origin channel; strings are coerced through `Source`.
        content : str
            Feedback body.
        timestamp : datetime | str
            Either a `datetime` (formatted to the storage format) or an
            already formatted string.
        sentiment : Sentiment | str
            Sentiment class; strings are coerced through `Sentiment`.
        sentiment_score : float
            Score in [0, 1].
        """
        self.source = Source(source)
        self.content = content
        if isinstance(timestamp, datetime):
            self.timestamp = timestamp.strftime(TIMESTAMP_FORMAT)
        else:
            self.timestamp = timestamp
        self.sentiment = Sentiment(sentiment)
        self.sentiment_score = sentiment_score

    def __str__(self) -> str:
        return (
            f"Feedback: id:{self.id}, "
            f"source: {self.source.value}, "
            f"sentiment: {self.sentiment.value}, "
            f"timestamp: {self.timestamp}"
        )
