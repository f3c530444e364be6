"""Domain objects: excursions, federations, inscriptions, insurance and partners."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


@dataclass
class Excursion:
    """An excursion offered on a given date."""

    id: str
    description: str
    date: str
    price: int
    duration_days: int


@dataclass
class Federation:
    """A federation that partners can belong to."""

    id: str
    name: str


@dataclass
class Inscription:
    """A partner's sign-up for an excursion."""

    id: int
    partner: str
    excursion: str


class SecureType(Enum):
    """Kinds of insurance a standard partner can hold."""

    BASIC = 0
    COMPLETE = 1


@dataclass
class Secure:
    """An insurance policy with its price."""

    price: int
    type: SecureType


@dataclass
class Partner(ABC):
    """A club member."""

    id: str
    name: str

    @abstractmethod
    def discount(self) -> int:
        """Percentage discount on the monthly fee."""


@dataclass
class ChildrenPartner(Partner):
    """A child member attached to a parent partner."""

    parent: Partner

    def discount(self) -> int:
        # Children pay half the monthly fee.
        return 50


@dataclass
class FederatedPartner(Partner):
    """A member belonging to a federation."""

    nif: str
    federation: Federation

    excursion_discount = 10

    def discount(self) -> int:
        # 5% off the monthly fee; excursions get ``excursion_discount``.
        return 5


@dataclass
class StandardPartner(Partner):
    """A regular member with an insurance policy."""

    nif: str
    secure: Secure

    def discount(self) -> int:
        return 0