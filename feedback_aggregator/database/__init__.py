"""
The `database` package is responsible for all interactions with the feedback store.

Contents:
    - config:
        Settings and the SQLAlchemy engine / declarative base.

    - entities:
        The `Feedback` ORM model and its closed `Sentiment` / `Source` enumerations.

    - daos:
        `FeedbackDao`, the filter/aggregate/bulk-replace queries.

    - core:
        Service functions that connect the API router with the DAO
        (list, timeseries, summary, reseed).

    - helpers:
        The `@transactional` session/transaction decorator.

    - create_tables:
        Table creation for startup and the command line.
"""
