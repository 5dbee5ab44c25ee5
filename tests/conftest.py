"""
Pytest configuration and fixtures for the feedback app.
"""
from datetime import datetime

import pytest

from config import TestConfig
from feedback_app import create_app
from feedback_app.extensions import db
from feedback_app.models.feedback import Feedback, FeedbackRecord


@pytest.fixture
def app():
    """Fresh app on an in-memory database for every test."""
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def add_feedback(app):
    """Insert a row directly, with an explicit (UTC naive) created_at."""

    def _add(location="Check-in", rating="Good", reasons="", created_at=None):
        with app.app_context():
            row = Feedback(location=location, rating=rating, reasons=reasons)
            if created_at is not None:
                row.created_at = created_at
            db.session.add(row)
            db.session.commit()
            return row.id

    return _add


def make_record(created_at, rating="Good", location="Check-in", reasons="", id=None):
    return FeedbackRecord(
        location=location,
        rating=rating,
        reasons=reasons,
        created_at=created_at,
        id=id,
    )


@pytest.fixture
def reference():
    """Wednesday, 2024-02-14 10:30 (naive, same frame as the records)."""
    return datetime(2024, 2, 14, 10, 30)
