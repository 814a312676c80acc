"""
Create database tables from SQLAlchemy models.

Run on application startup (``INIT_MODE=runtime``) and from the shell before
applying an offline seed script:

    python -m feedback_aggregator.database.create_tables [--drop]
"""

import argparse
import logging

from feedback_aggregator.database.config.connection_engine import connection_engine, metadata
from feedback_aggregator.database.entities import feedback  # noqa: F401  registers the table

logger = logging.getLogger(__name__)


def create_tables(drop_existing: bool = False) -> None:
    """Create all tables from SQLAlchemy models, optionally dropping them first."""
    if drop_existing:
        logger.info("Dropping existing tables...")
        metadata.drop_all(connection_engine)

    metadata.create_all(connection_engine)
    logger.info("Tables ready: %s", ", ".join(sorted(metadata.tables)))


def main() -> int:
    parser = argparse.ArgumentParser(description="Create the feedback dashboard tables")
    parser.add_argument("--drop", action="store_true", help="Drop existing tables first")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    create_tables(drop_existing=args.drop)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
