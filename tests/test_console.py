import io

import pytest

from excursions.console import (
    AddExcursionCommand,
    Console,
    ConsoleView,
    ExcursionMenu,
    ExitCommand,
    ExitMenuCommand,
    GetExcursionByDateCommand,
    MenuCommand,
    main,
)
from excursions.controller import ExcursionController
from excursions.filedao import ExcursionFileDao
from excursions.models import Excursion
from excursions.ui import Execution


def make_console(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def make_controller(tmp_path, content=""):
    path = tmp_path / "excursions.txt"
    path.write_text(content, encoding="utf-8")
    return ExcursionController(ExcursionFileDao(path))


def test_write_appends_line_break():
    console, out = make_console()
    console.write("hello")
    assert out.getvalue() == "hello\n"


def test_read_shows_prompt_and_strips_newline():
    console, out = make_console("answer\n")
    assert console.read("Insert Id") == "answer"
    assert out.getvalue() == "Insert Id\n"


def test_read_at_end_of_input_raises():
    console, _ = make_console("")
    with pytest.raises(EOFError):
        console.read("Insert Id")


def test_read_int_parses_leading_number():
    console, _ = make_console("42\n 7abc\n-3\n")
    assert console.read_int("") == 42
    assert console.read_int("") == 7
    assert console.read_int("") == -3


@pytest.mark.parametrize("text", ["abc\n", "\n"])
def test_read_int_rejects_non_numbers(text):
    console, _ = make_console(text)
    with pytest.raises(ValueError):
        console.read_int("")


def test_exit_command():
    console, out = make_console()
    command = ExitCommand(console)
    assert command.title == "Exit"
    assert command.execute() is Execution.EXIT
    assert "Closing App" in out.getvalue()


def test_exit_menu_command():
    console, out = make_console()
    command = ExitMenuCommand(console)
    assert command.execute() is Execution.EXIT_MENU
    assert out.getvalue() == f"Exiting {command.title} menu\n"


def test_add_excursion_stores_it(tmp_path):
    controller = make_controller(tmp_path)
    console, _ = make_console("e1\nTrip\n2024-05-01\n100\n3\n")
    command = AddExcursionCommand(controller, console)
    assert command.execute() is Execution.CONTINUE
    assert controller.get_by_dates("2000-01-01", "") == [
        Excursion("e1", "Trip", "2024-05-01", 100, 3)
    ]


def test_add_excursion_bad_price_stores_nothing(tmp_path):
    controller = make_controller(tmp_path)
    console, _ = make_console("e1\nTrip\n2024-05-01\nlots\n3\n")
    with pytest.raises(ValueError):
        AddExcursionCommand(controller, console).execute()
    assert controller.get_by_dates("2000-01-01", "") == []


def test_get_by_date_lists_matches(tmp_path):
    controller = make_controller(
        tmp_path, "a;Alpha;2024-03-01;10;1\nb;Beta;2023-01-01;20;2\nc;Gamma;2024-06-01;30;3\n"
    )
    console, out = make_console("2024-01-01\n\n")
    assert GetExcursionByDateCommand(controller, console).execute() is Execution.CONTINUE
    lines = out.getvalue().splitlines()
    listed = [line for line in lines if "Description" in line]
    assert listed == ["1- Description Alpha", "2- Description Gamma"]


def test_get_by_date_without_dates_reports_and_continues(tmp_path):
    controller = make_controller(tmp_path, "a;Alpha;2024-03-01;10;1\n")
    console, out = make_console("\n\n")
    assert GetExcursionByDateCommand(controller, console).execute() is Execution.CONTINUE
    assert "Description" not in out.getvalue()


def test_menu_exit_option_ends_application():
    console, out = make_console("1\n")
    menu = MenuCommand("Main", console)
    assert [c.title for c in menu.commands] == ["Exit"]
    assert menu.run() is Execution.EXIT
    assert "Closing App" in out.getvalue()


def test_menu_repeats_on_invalid_option():
    console, out = make_console("5\n0\n1\n")
    menu = MenuCommand("Main", console)
    assert menu.run() is Execution.EXIT
    assert out.getvalue().splitlines().count("Main Menu") == 3


def test_add_action_puts_command_first():
    console, _ = make_console()
    menu = MenuCommand("Main", console)
    exit_menu = ExitMenuCommand(console)
    menu.add_action(exit_menu)
    assert menu.commands[0] is exit_menu
    assert [c.title for c in menu.commands] == ["Exit Menu", "Exit"]


def test_exit_menu_becomes_continue_for_parent():
    console, _ = make_console("1\n")
    menu = MenuCommand("Sub", console)
    menu.add_action(ExitMenuCommand(console))
    assert menu.execute() is Execution.CONTINUE


def test_empty_menu_exits_without_reading():
    console, out = make_console("")
    menu = MenuCommand("Main", console)
    menu.commands.clear()
    assert menu.run() is Execution.EXIT
    assert out.getvalue() == ""


def test_excursion_menu_order(tmp_path):
    console, _ = make_console()
    menu = ExcursionMenu("Excursion management", make_controller(tmp_path), console)
    assert [c.title for c in menu.commands] == [
        "Add Excursion",
        "Get Excursion By Date",
        "Exit Menu",
        "Exit",
    ]


def test_console_view_navigates_and_exits(tmp_path):
    console, out = make_console("1\n3\n2\n")
    view = ConsoleView(console, make_controller(tmp_path))
    assert [c.title for c in view.menu.commands] == ["Excursion management", "Exit"]
    assert view.init([]) is Execution.EXIT
    text = out.getvalue()
    assert "Excursion management Menu" in text
    assert "Closing App" in text


def test_console_view_adds_then_exits(tmp_path):
    controller = make_controller(tmp_path)
    console, _ = make_console("1\n1\nx\nWalk\n2024-02-02\n5\n1\n4\n")
    assert ConsoleView(console, controller).init([]) is Execution.EXIT
    assert controller.get_by_dates("2024-01-01", "") == [
        Excursion("x", "Walk", "2024-02-02", 5, 1)
    ]


def test_main_runs_until_exit(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    assert main([]) == 0
    assert "Closing App" in capsys.readouterr().out


def test_main_stops_at_end_of_input(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "Main Menu" in capsys.readouterr().out