from __future__ import annotations

import io

from rich.console import Console

from roster import reporter
from roster.domain.models import Student
from roster.errors import (
    DuplicateIdentifierError,
    EmptyRosterError,
    PersistenceError,
    StudentNotFoundError,
)
from roster.store import Outcome, OutcomeKind, RosterListing


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=100, force_terminal=False, color_system=None), buffer


def test_print_listing_shows_students_and_total():
    console, buffer = _console()
    listing = RosterListing(
        [
            Student(id=1, name="Ann", age=20, course="CS"),
            Student(id=2, name="Bo", age=22, course="Math"),
        ]
    )

    reporter.print_listing(listing, console)

    output = buffer.getvalue()
    assert "Ann" in output
    assert "Math" in output
    assert "Total Students: 2" in output
    assert output.index("Ann") < output.index("Bo")


def test_print_student_keeps_markup_like_names():
    console, buffer = _console()

    reporter.print_student(Student(id=5, name="[bold]Eve[/bold]", age=30, course="CS"), console)

    assert "Name   : [bold]Eve[/bold]" in buffer.getvalue()


def test_outcome_messages_are_distinct():
    console, buffer = _console()

    reporter.print_outcome(Outcome(kind=OutcomeKind.ADDED, student_id=1, count=1), console)
    reporter.print_outcome(Outcome(kind=OutcomeKind.REMOVED, student_id=1, count=0), console)
    reporter.print_outcome(
        Outcome(kind=OutcomeKind.ADDED, student_id=2, count=1, warning="Error saving data: [Errno 28]"),
        console,
    )
    reporter.print_outcome(
        Outcome(kind=OutcomeKind.LOADED, warning="Error loading data: bad json"), console
    )

    output = buffer.getvalue()
    assert "Student added successfully." in output
    assert "Student removed successfully." in output
    assert "Error saving data: [Errno 28]" in output
    assert "Error loading data: bad json" in output


def test_error_messages_are_distinct():
    console, buffer = _console()

    reporter.print_error(DuplicateIdentifierError(1), console)
    reporter.print_error(StudentNotFoundError(99), console)
    reporter.print_error(EmptyRosterError(), console)
    reporter.print_error(PersistenceError("Error saving data: nope"), console)

    output = buffer.getvalue()
    assert "Student with ID 1 already exists." in output
    assert "No student found with ID: 99" in output
    assert "No students to display." in output
    assert "Error saving data: nope" in output


def test_print_listing_plain_uses_separator_blocks():
    console, buffer = _console()
    listing = RosterListing(
        [
            Student(id=1, name="Ann", age=20, course="CS"),
            Student(id=2, name="Bo", age=22, course="Math"),
        ]
    )

    reporter.print_listing_plain(listing, console)

    lines = buffer.getvalue().splitlines()
    assert lines == list(listing.lines())
    assert lines.count(listing.separator) == 3


def test_print_student_follows_display_fields():
    console, buffer = _console()
    student = Student(id=4, name="Dara", age=25, course="History")

    reporter.print_student(student, console)

    assert buffer.getvalue().splitlines() == student.render().splitlines()
