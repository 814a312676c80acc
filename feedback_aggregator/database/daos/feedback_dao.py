"""
Feedback DAO — Filter, Aggregate & Bulk Replace
===============================================

Purpose
-------
Data-access layer for the `Feedback` entity:
- Filtered listing (lookback window, sentiment, source, limit)
- Per-day sentiment counts for the timeseries chart
- Recent rows for the summarization prompt
- Full-table clear and bulk insert used by the reseed

Query Model
-----------
- Every caller-supplied value (including the `days` modifier handed to
  SQLite's `datetime('now', ...)`) is sent as a bound parameter.
- Time windows are evaluated by the store relative to its own clock.

Transaction Model
-----------------
- This DAO stages work on the given session but does **not** call `commit()`.
  The caller controls transactions (see `helpers.transactionManagement`).

Error Handling
--------------
- Errors are logged and re-raised for the caller to handle.
"""

import logging
from typing import Iterable, List, Optional

from sqlalchemy import delete, func
from sqlalchemy.orm import Session

from feedback_aggregator.database.entities.feedback import Feedback, Sentiment, Source

logger = logging.getLogger(__name__)


def window_start(days: int):
    """SQL expression for the start of a `days`-long lookback window ending now."""
    return func.datetime("now", f"-{int(days)} days")


class FeedbackDao:
    """
    Data Access Object for `Feedback`.

    Notes:
        - Session management (commit/rollback/close) is delegated to the caller.
        - Filter values are already-parsed enum members; unknown values are
          handled by the service layer before reaching the DAO.
    """

    def fetchFeedback(
        self,
        session: Session,
        days: int,
        sentiment: Optional[Sentiment] = None,
        source: Optional[Source] = None,
        limit: int = 100,
    ) -> List[Feedback]:
        """
        Fetch feedback inside the lookback window, newest first.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        days : int
            Lookback window in days.
        sentiment : Sentiment, optional
            Restrict to one sentiment class.
        source : Source, optional
            Restrict to one channel.
        limit : int
            Maximum number of rows returned.

        Returns
        -------
        list[Feedback]
            Matching rows ordered by `timestamp` descending.
        """
        try:
            query = session.query(Feedback).filter(Feedback.timestamp >= window_start(days))
            if sentiment is not None:
                query = query.filter(Feedback.sentiment == sentiment)
            if source is not None:
                query = query.filter(Feedback.source == source)
            return query.order_by(Feedback.timestamp.desc(), Feedback.id.desc()).limit(limit).all()
        except Exception:
            logger.exception("Error in FeedbackDao.fetchFeedback")
            raise

    def fetchTimeseries(
        self,
        session: Session,
        days: int,
        sentiment: Optional[Sentiment] = None,
    ):
        """
        Count feedback per (calendar date, sentiment) inside the window.

        Returns
        -------
        list[Row]
            Rows with `date` (``YYYY-MM-DD``), `sentiment` and `count`,
            ordered by date ascending.
        """
        try:
            day = func.date(Feedback.timestamp).label("date")
            query = session.query(
                day,
                Feedback.sentiment.label("sentiment"),
                func.count(Feedback.id).label("count"),
            ).filter(Feedback.timestamp >= window_start(days))
            if sentiment is not None:
                query = query.filter(Feedback.sentiment == sentiment)
            return (
                query.group_by(day, Feedback.sentiment)
                .order_by(day.asc(), Feedback.sentiment.asc())
                .all()
            )
        except Exception:
            logger.exception("Error in FeedbackDao.fetchTimeseries")
            raise

    def fetchRecentForSummary(self, session: Session, days: int, limit: int = 50):
        """
        Fetch the most recent `limit` rows of the window, projected to the
        columns the summary prompt needs (`source`, `content`, `sentiment`).
        """
        try:
            return (
                session.query(Feedback.source, Feedback.content, Feedback.sentiment)
                .filter(Feedback.timestamp >= window_start(days))
                .order_by(Feedback.timestamp.desc(), Feedback.id.desc())
                .limit(limit)
                .all()
            )
        except Exception:
            logger.exception("Error in FeedbackDao.fetchRecentForSummary")
            raise

    def deleteAll(self, session: Session) -> int:
        """Delete every feedback row. Returns the number of rows removed."""
        try:
            result = session.execute(delete(Feedback))
            return result.rowcount
        except Exception:
            logger.exception("Error in FeedbackDao.deleteAll")
            raise

    def createFeedbackBatch(self, session: Session, records: Iterable[Feedback]) -> int:
        """
        Stage a batch of new `Feedback` rows and flush them.

        Returns
        -------
        int
            Number of rows staged.
        """
        try:
            records = list(records)
            session.add_all(records)
            session.flush()
            return len(records)
        except Exception:
            logger.exception("Error in FeedbackDao.createFeedbackBatch")
            raise
