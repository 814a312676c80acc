"""
Connection Engine (SQLAlchemy)

Purpose
-------
Centralizes database initialization for the application:
- Builds the SQLAlchemy connection URL from environment-backed settings.
- Creates the Engine (connection pool + SQL execution entry point).
- Defines shared MetaData for table and schema objects.
- Exposes a Declarative Base class for ORM models.

Notes
-----
- The query layer relies on SQLite date functions (`datetime('now', ...)`,
  `DATE(...)`) for its time windows, so the store is expected to be SQLite.
- All ORM models must inherit from `declarativeBase`.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import URL
from sqlalchemy.orm import declarative_base
from sqlalchemy.schema import MetaData
from feedback_aggregator.database.config.config import settings

# --------------------------------------------------------------------
# Construct the SQLAlchemy connection URL using values from Settings.
# --------------------------------------------------------------------
connection_url = URL.create(
    drivername=settings.DB_DRIVER_NAME,   # e.g., "sqlite"
    username=settings.DB_USERNAME,
    password=settings.DB_PASSWORD,
    host=settings.DB_HOST,
    database=settings.DB_DATABASE_NAME    # file path for SQLite
)
"""SQLAlchemy connection URL built from Settings."""

connection_engine = create_engine(connection_url)
"""Engine object: core interface to the database (connections, SQL execution, pooling)."""

metadata = MetaData()
"""Stores schema-level information about tables, constraints and indexes."""

declarativeBase = declarative_base(metadata=metadata)
"""Root class for ORM models."""
