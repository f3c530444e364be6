"""Text console front end for managing excursions."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence, TextIO

from .controller import ExcursionController
from .dateutils import DATE_FORMAT
from .models import Excursion
from .ui import Command, Execution, Menu, View

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Console:
    """Line-oriented reading and writing on a pair of text streams."""

    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
    ) -> None:
        self._input = input_stream
        self._output = output_stream

    def write(self, prompt: str) -> None:
        """Write ``prompt`` followed by a line break."""
        out = self._output if self._output is not None else sys.stdout
        print(prompt, file=out)

    def read(self, prompt: str) -> str:
        """Show ``prompt`` and return the next line without its line break."""
        self.write(prompt)
        source = self._input if self._input is not None else sys.stdin
        line = source.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def read_int(self, prompt: str) -> int:
        """Show ``prompt`` and parse the integer the line starts with."""
        value = self.read(prompt)
        match = _LEADING_INT.match(value)
        if match is None:
            raise ValueError(f"not a number: {value!r}")
        return int(match.group(1))


class ExitCommand(Command):
    """Ends the whole application."""

    def __init__(self, console: Optional[Console] = None) -> None:
        super().__init__("Exit")
        self._console = console or Console()

    def execute(self) -> Execution:
        self._console.write("Closing App")
        return Execution.EXIT


class ExitMenuCommand(Command):
    """Leaves the current menu and returns to its parent."""

    def __init__(self, console: Optional[Console] = None) -> None:
        super().__init__("Exit Menu")
        self._console = console or Console()

    def execute(self) -> Execution:
        self._console.write(f"Exiting {self.title} menu")
        return Execution.EXIT_MENU


class AddExcursionCommand(Command):
    """Asks for an excursion's details and stores it."""

    def __init__(
        self, controller: ExcursionController, console: Optional[Console] = None
    ) -> None:
        super().__init__("Add Excursion")
        self._controller = controller
        self._console = console or Console()

    def execute(self) -> Execution:
        ident = self._console.read("Insert Id")
        description = self._console.read("Insert Description")
        date = self._console.read("Insert Date")
        price = self._console.read_int("Insert price")
        duration_days = self._console.read_int("Insert duration")
        self._controller.add(Excursion(ident, description, date, price, duration_days))
        return Execution.CONTINUE


class GetExcursionByDateCommand(Command):
    """Lists the excursions matching a start and/or end date."""

    def __init__(
        self, controller: ExcursionController, console: Optional[Console] = None
    ) -> None:
        super().__init__("Get Excursion By Date")
        self._controller = controller
        self._console = console or Console()

    def execute(self) -> Execution:
        start_date = self._console.read(f"Insert the start date {DATE_FORMAT}")
        end_date = self._console.read(f"Insert the end Date {DATE_FORMAT}")
        try:
            excursions = self._controller.get_by_dates(start_date, end_date)
        except ValueError as exc:
            self._console.write(str(exc))
            return Execution.CONTINUE
        for number, excursion in enumerate(excursions, start=1):
            self._console.write(f"{number}- Description {excursion.description}")
        return Execution.CONTINUE


class MenuCommand(Menu, Command):
    """A menu that is itself a command, always offering a way to exit."""

    def __init__(self, title: str, console: Optional[Console] = None) -> None:
        Menu.__init__(self)
        Command.__init__(self, title)
        self._console = console or Console()
        self.commands.append(ExitCommand(self._console))

    def execute(self) -> Execution:
        return self.run()

    def run(self) -> Execution:
        if not self.commands:
            return Execution.EXIT
        chosen = False
        execution = Execution.CONTINUE
        while not chosen or execution is Execution.CONTINUE:
            self._console.write(f"{self.title} Menu")
            for number, command in enumerate(self.commands, start=1):
                self._console.write(f"{number}. {command.title}")
            option = self._console.read_int("") - 1
            if 0 <= option < len(self.commands):
                execution = self.commands[option].execute()
                chosen = True
        if execution is Execution.EXIT_MENU:
            return Execution.CONTINUE
        return execution

    def add_action(self, command: Command) -> None:
        """Offer ``command`` ahead of the ones already listed."""
        self.commands.insert(0, command)


class ExcursionMenu(MenuCommand):
    """Menu for listing and adding excursions."""

    def __init__(
        self,
        title: str,
        controller: Optional[ExcursionController] = None,
        console: Optional[Console] = None,
    ) -> None:
        super().__init__(title, console)
        self._controller = controller if controller is not None else ExcursionController()
        self.add_action(ExitMenuCommand(self._console))
        self.add_action(GetExcursionByDateCommand(self._controller, self._console))
        self.add_action(AddExcursionCommand(self._controller, self._console))


class ConsoleView(View):
    """Console interface starting from the main menu."""

    def __init__(
        self,
        console: Optional[Console] = None,
        controller: Optional[ExcursionController] = None,
    ) -> None:
        self._console = console or Console()
        self.menu = MenuCommand("Main", self._console)
        self.menu.add_action(
            ExcursionMenu("Excursion management", controller, self._console)
        )

    def init(self, argv: Optional[Sequence[str]]) -> Execution:
        return self.menu.run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the console application."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        ConsoleView().init(argv)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())