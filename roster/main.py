from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from roster import reporter
from roster.config import get_settings
from roster.domain.models import Student
from roster.errors import EmptyRosterError, RosterError
from roster.menu import run_menu
from roster.store import StudentStore
from roster.utils.logging import configure_logging

app = typer.Typer(help="Student roster CLI.")


def _open_store(ctx: typer.Context, console: Console) -> StudentStore:
    store = StudentStore(ctx.obj)
    outcome = store.initialize()
    if outcome.warning:
        reporter.print_outcome(outcome, console)
    return store


@app.callback(invoke_without_command=True)
def root(
    ctx: typer.Context,
    data_file: Optional[Path] = typer.Option(
        None,
        "--data-file",
        "-f",
        help="Backing file for the roster (default from settings).",
    ),
) -> None:
    """
    Manage a roster of students. Without a command, starts the interactive menu.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    ctx.obj = data_file or settings.data_file

    if ctx.invoked_subcommand is None:
        console = Console()
        run_menu(_open_store(ctx, console), console)


@app.command()
def info(ctx: typer.Context) -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"data_file={ctx.obj} | env={settings.app_env} | "
        f"log_level={settings.log_level} json_logs={settings.json_logs}"
    )


@app.command()
def menu(ctx: typer.Context) -> None:
    """
    Start the interactive menu.
    """
    console = Console()
    run_menu(_open_store(ctx, console), console)


@app.command()
def add(
    ctx: typer.Context,
    student_id: int = typer.Argument(..., metavar="ID", help="Unique student id."),
    name: str = typer.Argument(..., help="Student name."),
    age: int = typer.Argument(..., help="Student age."),
    course: str = typer.Argument(..., help="Course the student is enrolled in."),
) -> None:
    """
    Add a student to the roster.
    """
    console = Console()
    store = _open_store(ctx, console)
    try:
        outcome = store.add(Student(id=student_id, name=name, age=age, course=course))
    except RosterError as exc:
        reporter.print_error(exc, console)
        raise typer.Exit(code=1)
    reporter.print_outcome(outcome, console)


@app.command()
def remove(
    ctx: typer.Context,
    student_id: int = typer.Argument(..., metavar="ID", help="Id of the student to remove."),
) -> None:
    """
    Remove a student from the roster.
    """
    console = Console()
    store = _open_store(ctx, console)
    try:
        outcome = store.remove(student_id)
    except RosterError as exc:
        reporter.print_error(exc, console)
        raise typer.Exit(code=1)
    reporter.print_outcome(outcome, console)


@app.command(name="list")
def list_students(
    ctx: typer.Context,
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print separator-delimited blocks instead of a table.",
    ),
) -> None:
    """
    Display every student in insertion order.
    """
    console = Console()
    store = _open_store(ctx, console)
    try:
        listing = store.list_all()
    except EmptyRosterError as exc:
        reporter.print_error(exc, console)
        return
    if plain:
        reporter.print_listing_plain(listing, console)
    else:
        reporter.print_listing(listing, console)


@app.command()
def show(
    ctx: typer.Context,
    student_id: int = typer.Argument(..., metavar="ID", help="Id of the student to display."),
) -> None:
    """
    Display one student.
    """
    console = Console()
    store = _open_store(ctx, console)
    try:
        student = store.find_one(student_id)
    except RosterError as exc:
        reporter.print_error(exc, console)
        raise typer.Exit(code=1)
    reporter.print_student(student, console)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
