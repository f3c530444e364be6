"""Date filters selected from an optional start and end date."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from . import dateutils


class DateFilter(ABC):
    """Decides whether a date passes a filter built from a start and end date."""

    def __init__(self, start_date: str, end_date: str) -> None:
        self.start_date = start_date
        self.end_date = end_date

    @abstractmethod
    def filter(self, date: dateutils.DateLike) -> bool:
        """Return True when ``date`` passes the filter."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(start_date={self.start_date!r}, "
            f"end_date={self.end_date!r})"
        )


class StartDateFilter(DateFilter):
    """Accepts dates on or after the start date."""

    def __init__(self, start_date: str) -> None:
        super().__init__(start_date, "")

    def filter(self, date: dateutils.DateLike) -> bool:
        return dateutils.after(date, self.start_date)


class EndDateFilter(DateFilter):
    """Filter built from only an end date; accepts dates on or after it."""

    def __init__(self, end_date: str) -> None:
        super().__init__("", end_date)

    def filter(self, date: dateutils.DateLike) -> bool:
        return dateutils.after(date, self.end_date)


class BetweenDateFilter(DateFilter):
    """Accepts dates strictly between the start and end dates."""

    def filter(self, date: dateutils.DateLike) -> bool:
        return dateutils.between(date, self.start_date, self.end_date)


def get_filter(start_date: str, end_date: str) -> Optional[DateFilter]:
    """Pick the filter that matches which dates were given; None if neither."""
    if start_date and end_date:
        return BetweenDateFilter(start_date, end_date)
    if start_date:
        return StartDateFilter(start_date)
    if end_date:
        return EndDateFilter(end_date)
    return None