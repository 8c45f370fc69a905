"""
Tests for logging setup and sensitive data filtering.
"""

import logging

from fit_coach.logging_setup import SensitiveDataFilter


def _record(msg, args=()):
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )


def test_sensitive_data_filter_db_url_in_message():
    """Database passwords are redacted from the message itself."""
    record = _record("Connecting to postgresql+asyncpg://coach:s3cret@db:5432/fit")

    assert SensitiveDataFilter().filter(record) is True
    assert "s3cret" not in record.msg
    assert "coach:<REDACTED>@db" in record.msg


def test_sensitive_data_filter_db_url_in_args():
    """Database passwords passed as format args are redacted too."""
    record = _record("Database initialized: %s", ("postgresql://coach:s3cret@db/fit",))

    SensitiveDataFilter().filter(record)

    assert "s3cret" not in record.getMessage()


def test_sensitive_data_filter_normal_message():
    """Normal messages pass through unchanged."""
    record = _record("Generated plan plan_7: template=full_body_3d days_per_week=3")
    original_msg = record.msg

    assert SensitiveDataFilter().filter(record) is True
    assert record.msg == original_msg
