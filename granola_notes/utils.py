"""
Small utility functions: date parsing/formatting and id shortening.
"""

from __future__ import annotations

import datetime as dt

from .config import SHORT_ID_LENGTH


def parse_timestamp(value: str) -> float | None:
    """
    Parse an ISO-8601 date or date-time into a POSIX timestamp.
    Returns None for empty or unparseable input. Naive values are read as UTC.
    """
    d = _parse_iso(value)
    if d is None:
        return None
    return d.timestamp()


def _parse_iso(value: str) -> dt.datetime | None:
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        d = dt.datetime.fromisoformat(text)
    except ValueError:
        return None
    if d.tzinfo is None:
        d = d.replace(tzinfo=dt.timezone.utc)
    return d


def format_date(value: str) -> str:
    """Render a created_at value like 'Tue, Jan 2, 2024' in local time."""
    if not value:
        return "Unknown date"
    d = _parse_iso(value)
    if d is None:
        return "Invalid Date"
    d = d.astimezone()
    return f"{d:%a}, {d:%b} {d.day}, {d.year}"


def short_id(meeting_id: str) -> str:
    return meeting_id[:SHORT_ID_LENGTH]


def iso_timestamp_utc() -> str:
    # e.g. 2024-01-02T09:30:00.123Z
    now = dt.datetime.now(dt.timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
