"""
Entities Package — SQLAlchemy 2.0 ORM Models
============================================

The `entities` package defines the ORM models of the application, mapping
database tables to Python classes using SQLAlchemy 2.0-typed mappings.
These classes are consumed by DAOs (`daos` package).

Contents
--------
- Feedback
    One customer feedback record.
    * Table: `feedback`
    * Fields: `id` (int PK), `source` (Source enum), `content`,
      `timestamp` (UTC string, second precision), `sentiment` (Sentiment enum),
      `sentiment_score` (float in [0, 1])

- Sentiment, Source
    Closed enumerations stored by value; anything else is rejected on write.
"""
