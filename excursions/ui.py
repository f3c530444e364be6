"""Abstractions for interactive front ends: commands, menus and views."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Sequence


class Execution(Enum):
    """What a menu should do after a command has run."""

    CONTINUE = 0
    EXIT_MENU = 1
    EXIT = 2


class Command(ABC):
    """An action a user can pick by its title."""

    def __init__(self, title: str) -> None:
        self.title = title

    @abstractmethod
    def execute(self) -> Execution:
        """Carry out the action and say how the caller should proceed."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(title={self.title!r})"


class Menu(ABC):
    """A list of commands offered to the user."""

    def __init__(self) -> None:
        self.commands: List[Command] = []

    @abstractmethod
    def run(self) -> Execution:
        """Offer the commands until one ends the menu."""

    @abstractmethod
    def add_action(self, command: Command) -> None:
        """Make another command available."""


class View(ABC):
    """Entry point of a user interface."""

    @abstractmethod
    def init(self, argv: Optional[Sequence[str]]) -> Execution:
        """Start the interface with the given command-line arguments."""