from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from roster.domain.models import LABEL_WIDTH, Student
from roster.errors import (
    DuplicateIdentifierError,
    EmptyRosterError,
    PersistenceError,
    RosterError,
    StudentNotFoundError,
)
from roster.store import Outcome, OutcomeKind, RosterListing


def _console(console: Optional[Console]) -> Console:
    return console if console is not None else Console()


def print_listing(listing: RosterListing, console: Optional[Console] = None) -> None:
    """
    Render the roster as a rich table with the total count as caption.
    """
    console = _console(console)

    table = Table(
        title="Students",
        caption=f"Total Students: {listing.total}",
        box=box.SIMPLE_HEAVY,
        show_lines=False,
    )
    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Age", justify="right")
    table.add_column("Course")

    for entry in listing:
        student = entry.student
        table.add_row(
            str(student.id),
            escape(student.name),
            str(student.age),
            escape(student.course),
        )

    console.print(table)


def print_listing_plain(listing: RosterListing, console: Optional[Console] = None) -> None:
    """
    Render the roster as separator-delimited student blocks followed by the total.
    """
    console = _console(console)
    for line in listing.lines():
        console.print(escape(line), highlight=False)


def print_student(student: Student, console: Optional[Console] = None) -> None:
    """Render one student as labeled lines."""
    console = _console(console)
    for label, value in student.display_fields():
        console.print(f"[bold]{label:<{LABEL_WIDTH}}[/bold] : {escape(value)}", highlight=False)


def print_outcome(outcome: Outcome, console: Optional[Console] = None) -> None:
    """
    Report a successful store operation, plus any persistence warning.
    """
    console = _console(console)

    if outcome.kind is OutcomeKind.ADDED:
        console.print("[green]✅ Student added successfully.[/green]")
    elif outcome.kind is OutcomeKind.REMOVED:
        console.print("[green]✅ Student removed successfully.[/green]")

    if outcome.warning:
        label = "loading" if outcome.kind is OutcomeKind.LOADED else "saving"
        console.print(f"[yellow]⚠ Error {label} data: {escape(_strip_prefix(outcome.warning))}[/yellow]")


def print_error(error: RosterError, console: Optional[Console] = None) -> None:
    """
    Report a store error in its own message category.
    """
    console = _console(console)
    message = escape(str(error))

    if isinstance(error, EmptyRosterError):
        console.print(f"[yellow]📂 {message}[/yellow]")
    elif isinstance(error, (DuplicateIdentifierError, StudentNotFoundError)):
        console.print(f"[red]❌ {message}[/red]")
    elif isinstance(error, PersistenceError):
        console.print(f"[yellow]⚠ {message}[/yellow]")
    else:
        console.print(f"[red]{message}[/red]")


def _strip_prefix(warning: str) -> str:
    for prefix in ("Error loading data: ", "Error saving data: "):
        if warning.startswith(prefix):
            return warning[len(prefix):]
    return warning


__all__ = ["print_listing", "print_listing_plain", "print_student", "print_outcome", "print_error"]
