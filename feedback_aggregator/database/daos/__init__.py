"""
DAOs Package — Data Access Layer (SQLAlchemy 2.0)
=================================================

The `daos` package encapsulates all interactions with SQLAlchemy ORM entities,
providing small query APIs for the service layer while hiding query details.

Conventions
-----------
- Session lifecycle (open/commit/rollback) is handled by callers
- DAOs surface exceptions so upper layers decide error policy
- Caller values are always bound parameters

Contents
--------
- FeedbackDao
    * fetchFeedback(session, days, sentiment, source, limit) — filtered list, newest first
    * fetchTimeseries(session, days, sentiment) — (date, sentiment, count) rows
    * fetchRecentForSummary(session, days, limit) — source/content/sentiment projection
    * deleteAll(session) / createFeedbackBatch(session, records) — reseed building blocks
"""
