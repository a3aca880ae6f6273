"""
Interactive menu loop for the student roster.

Mirrors the classic numbered console menu: create, remove, display all,
display one, exit. Input is read with typer prompts, which re-ask until an
integer is entered where one is expected.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

import typer
from rich.console import Console

from roster import reporter
from roster.domain.models import Student
from roster.errors import RosterError
from roster.store import StudentStore

MENU_TITLE = "--- Student Management Menu ---"
EXIT_CHOICE = 5

MENU_OPTIONS: Dict[int, str] = {
    1: "Create Student",
    2: "Remove Student",
    3: "Display All Students",
    4: "Display One Student",
    EXIT_CHOICE: "Exit",
}


def _show_menu(console: Console) -> None:
    console.print()
    console.print(MENU_TITLE)
    for number, label in MENU_OPTIONS.items():
        console.print(f"{number}) {label}")


def _create(store: StudentStore, console: Console) -> None:
    student_id = typer.prompt("Enter ID", type=int)
    name = typer.prompt("Enter Name", type=str, default="", show_default=False)
    age = typer.prompt("Enter Age", type=int)
    course = typer.prompt("Enter Course", type=str, default="", show_default=False)
    outcome = store.add(Student(id=student_id, name=name, age=age, course=course))
    reporter.print_outcome(outcome, console)


def _remove(store: StudentStore, console: Console) -> None:
    student_id = typer.prompt("Enter Student ID to remove", type=int)
    outcome = store.remove(student_id)
    reporter.print_outcome(outcome, console)


def _display_all(store: StudentStore, console: Console) -> None:
    reporter.print_listing_plain(store.list_all(), console)


def _display_one(store: StudentStore, console: Console) -> None:
    student_id = typer.prompt("Enter Student ID to display", type=int)
    reporter.print_student(store.find_one(student_id), console)


_ACTIONS: Dict[int, Callable[[StudentStore, Console], None]] = {
    1: _create,
    2: _remove,
    3: _display_all,
    4: _display_one,
}


def run_menu(store: StudentStore, console: Optional[Console] = None) -> None:
    """
    Run the menu until the user picks Exit.

    Store errors are reported and the loop continues; none of them end the
    session.
    """
    console = console if console is not None else Console()

    while True:
        _show_menu(console)
        choice = typer.prompt("Enter your choice", type=int)

        if choice == EXIT_CHOICE:
            console.print("👋 Exiting... Goodbye!")
            return

        action = _ACTIONS.get(choice)
        if action is None:
            console.print("[red]❌ Invalid choice. Please try again.[/red]")
            continue

        try:
            action(store, console)
        except RosterError as exc:
            reporter.print_error(exc, console)


__all__ = ["run_menu", "MENU_OPTIONS", "EXIT_CHOICE"]
