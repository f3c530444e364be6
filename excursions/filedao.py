"""Data access objects, with implementations backed by ``;``-separated text files."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, Iterable, List, TypeVar, Union

from .datefilters import get_filter
from .models import Excursion, Federation, Secure

DEFAULT_EXCURSIONS_PATH = Path("filedb") / "excursions.txt"
DEFAULT_FEDERATIONS_PATH = Path("filedb") / "federations.txt"

SEPARATOR = ";"

PathLike = Union[str, "os.PathLike[str]"]
T = TypeVar("T")


class ExcursionDao(ABC):
    """Storage of excursions."""

    @abstractmethod
    def get_by_dates(self, start_date: str, end_date: str) -> List[Excursion]:
        """Return the excursions whose date passes the filter for the given dates."""

    @abstractmethod
    def add(self, excursion: Excursion) -> None:
        """Store a new excursion."""


class FederationDao(ABC):
    """Storage of federations."""

    @abstractmethod
    def get_all_federations(self) -> List[Federation]:
        """Return every known federation."""


class SecureDao(ABC):
    """Storage of insurance policies."""

    @abstractmethod
    def get_all_secures(self) -> List[Secure]:
        """Return every known insurance policy."""


def _split_record(line: str) -> List[str]:
    """Split one line into fields; an empty line has none, a trailing ``;`` adds none."""
    if not line:
        return []
    fields = line.split(SEPARATOR)
    if fields[-1] == "":
        fields.pop()
    return fields


class FileDao(ABC, Generic[T]):
    """Reads and appends records stored one per line with ``;`` between fields."""

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)

    def read_file(self) -> List[List[str]]:
        """Return the non-empty records of the file; a missing file yields none."""
        try:
            with self.path.open(encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except FileNotFoundError:
            print("File not found")
            return []
        return [fields for fields in map(_split_record, lines) if fields]

    def append_record(self, fields: Iterable[str]) -> None:
        """Append one record to the end of the file, creating the file if needed."""
        values = [str(field) for field in fields]
        for value in values:
            if SEPARATOR in value or "\n" in value or "\r" in value:
                raise ValueError(f"field {value!r} may not contain {SEPARATOR!r} or a line break")
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(SEPARATOR.join(values) + "\n")

    def _load(self) -> List[T]:
        return [self._map(fields) for fields in self.read_file()]

    @abstractmethod
    def _map(self, fields: List[str]) -> T:
        """Build a model object from one record."""


def _require_fields(fields: List[str], count: int, kind: str) -> None:
    if len(fields) < count:
        raise ValueError(f"malformed {kind} record {fields!r}: expected {count} fields")


class ExcursionFileDao(FileDao[Excursion], ExcursionDao):
    """Excursions kept in a text file and cached in memory."""

    def __init__(self, path: PathLike = DEFAULT_EXCURSIONS_PATH) -> None:
        super().__init__(path)
        self._excursions: List[Excursion] = self._load()

    def get_by_dates(self, start_date: str, end_date: str) -> List[Excursion]:
        date_filter = get_filter(start_date, end_date)
        if date_filter is None:
            raise ValueError("a start date or an end date is required")
        return [e for e in self._excursions if date_filter.filter(e.date)]

    def add(self, excursion: Excursion) -> None:
        self.append_record(
            [
                excursion.id,
                excursion.description,
                excursion.date,
                str(excursion.price),
                str(excursion.duration_days),
            ]
        )
        self._excursions = self._load()

    def _map(self, fields: List[str]) -> Excursion:
        _require_fields(fields, 5, "excursion")
        return Excursion(fields[0], fields[1], fields[2], int(fields[3]), int(fields[4]))


class FederationFileDao(FileDao[Federation], FederationDao):
    """Federations read from a text file."""

    def __init__(self, path: PathLike = DEFAULT_FEDERATIONS_PATH) -> None:
        super().__init__(path)
        self._federations: List[Federation] = self._load()

    def get_all_federations(self) -> List[Federation]:
        return self._federations

    def _map(self, fields: List[str]) -> Federation:
        _require_fields(fields, 2, "federation")
        return Federation(fields[0], fields[1])