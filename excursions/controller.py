"""Application logic for managing excursions."""

from __future__ import annotations

from typing import List, Optional

from .filedao import ExcursionDao, ExcursionFileDao
from .models import Excursion


class ExcursionController:
    """Adds and looks up excursions through a DAO."""

    def __init__(self, dao: Optional[ExcursionDao] = None) -> None:
        self._dao = dao if dao is not None else ExcursionFileDao()

    def add(self, excursion: Excursion) -> None:
        """Store a new excursion."""
        self._dao.add(excursion)

    def get_by_dates(self, start_date: str, end_date: str) -> List[Excursion]:
        """Return the excursions matching the given start and/or end date."""
        return self._dao.get_by_dates(start_date, end_date)