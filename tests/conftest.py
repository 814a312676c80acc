"""
Pytest configuration and fixtures for the feedback dashboard tests.

The database settings are read when `feedback_aggregator` is first imported,
so the environment is pointed at a throwaway SQLite file before any test
module imports the package.
"""
import os
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

_DB_DIR = tempfile.mkdtemp(prefix="feedback-tests-")
os.environ["DB_DRIVER_NAME"] = "sqlite"
os.environ["DB_DATABASE_NAME"] = str(Path(_DB_DIR) / "feedback.db")
os.environ["INIT_MODE"] = "runtime"
os.environ["API_KEY"] = "test-key"


def _ago(days: float = 0, hours: float = 0) -> str:
    moment = datetime.now(timezone.utc) - timedelta(days=days, hours=hours)
    return moment.strftime("%Y-%m-%d %H:%M:%S")


@pytest.fixture
def ago():
    """UTC timestamp string `days`/`hours` before now, in storage format."""
    return _ago


@pytest.fixture
def db():
    """Empty `feedback` table for each test."""
    from sqlalchemy import delete

    from feedback_aggregator.database.create_tables import create_tables
    from feedback_aggregator.database.entities.feedback import Feedback
    from feedback_aggregator.database.helpers.transactionManagement import SessionFactory

    create_tables()
    with SessionFactory() as session:
        session.execute(delete(Feedback))
        session.commit()
    yield SessionFactory


@pytest.fixture
def add_feedback(db):
    """Insert feedback rows directly; returns the created ids."""
    from feedback_aggregator.database.entities.feedback import Feedback

    def _add(*rows):
        with db() as session:
            records = [
                Feedback(
                    source=row.get("source", "Email"),
                    content=row.get("content", "Some feedback"),
                    timestamp=row["timestamp"],
                    sentiment=row.get("sentiment", "neutral"),
                    sentiment_score=row.get("sentiment_score", 0.5),
                )
                for row in rows
            ]
            session.add_all(records)
            session.commit()
            return [record.id for record in records]

    return _add


@pytest.fixture
def count_feedback(db):
    from feedback_aggregator.database.entities.feedback import Feedback

    def _count(**filters):
        with db() as session:
            return session.query(Feedback).filter_by(**filters).count()

    return _count


@pytest.fixture
def client(db):
    from fastapi.testclient import TestClient

    from feedback_aggregator.main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
