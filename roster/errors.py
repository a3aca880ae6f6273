"""
Exception hierarchy for the student roster.

Every failure the store can report is a subclass of RosterError so callers
(CLI, scripts) can catch the family in one place and still tell the kinds
apart by type.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class RosterError(Exception):
    """Base class for all roster errors."""


class DuplicateIdentifierError(RosterError):
    """A student with the same id is already on the roster."""

    def __init__(self, student_id: int) -> None:
        self.student_id = student_id
        super().__init__(f"Student with ID {student_id} already exists.")


class StudentNotFoundError(RosterError):
    """No student matches the requested id."""

    def __init__(self, student_id: int) -> None:
        self.student_id = student_id
        super().__init__(f"No student found with ID: {student_id}")


class EmptyRosterError(RosterError):
    """The roster holds no students, so there is nothing to list."""

    def __init__(self) -> None:
        super().__init__("No students to display.")


class PersistenceError(RosterError):
    """
    The backing file could not be read or written.

    The store never lets this escape: it is downgraded to a warning on the
    operation outcome.
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        super().__init__(message)


class StoreStateError(RosterError):
    """An operation was called in the wrong lifecycle state."""


__all__ = [
    "RosterError",
    "DuplicateIdentifierError",
    "StudentNotFoundError",
    "EmptyRosterError",
    "PersistenceError",
    "StoreStateError",
]
