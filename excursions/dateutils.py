"""Comparison helpers for calendar dates written as ``YYYY-MM-DD``."""

from __future__ import annotations

import datetime as _dt
from typing import Union

DATE_FORMAT = "YYYY-MM-DD"
_INTERNAL_FORMAT = "%Y-%m-%d"

DateLike = Union[str, _dt.date]


def convert(date: DateLike) -> _dt.date:
    """Parse a ``YYYY-MM-DD`` string into a date; dates pass through unchanged."""
    if isinstance(date, _dt.datetime):
        return date.date()
    if isinstance(date, _dt.date):
        return date
    try:
        return _dt.datetime.strptime(date.strip(), _INTERNAL_FORMAT).date()
    except ValueError as exc:
        raise ValueError(f"invalid date {date!r}, expected {DATE_FORMAT}") from exc


def equals(date: DateLike, other: DateLike) -> bool:
    """True when both values denote the same day."""
    return convert(date) == convert(other)


def before(date: DateLike, other: DateLike) -> bool:
    """True when ``date`` falls strictly before ``other``."""
    return convert(date) < convert(other)


def after(date: DateLike, other: DateLike) -> bool:
    """True when ``date`` is not before ``other`` (same day counts)."""
    return not before(date, other)


def between(date: DateLike, start_date: DateLike, end_date: DateLike) -> bool:
    """True when ``date`` lies strictly between the two bounds."""
    day = convert(date)
    return convert(start_date) < day < convert(end_date)