"""
Student store: the in-memory roster and its backing file.

Usage:
    from roster.store import StudentStore
    from roster.domain import Student

    store = StudentStore("students.json")
    store.initialize()
    store.add(Student(id=1, name="Ann", age=20, course="CS"))
    for entry in store.list_all():
        print(entry.separator)
        print(entry.student.render())

The store is the only owner of the student sequence and the only reader and
writer of the backing file. The file is read once by `initialize()` and
rewritten in full after every successful mutation.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from roster.config import get_settings
from roster.domain.models import Student
from roster.errors import (
    DuplicateIdentifierError,
    EmptyRosterError,
    PersistenceError,
    StoreStateError,
    StudentNotFoundError,
)
from roster.infrastructure.backing_file import read_snapshot, write_snapshot
from roster.utils.logging import get_logger

log = get_logger(__name__)

SEPARATOR = "---------------"


class StoreState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


class OutcomeKind(enum.Enum):
    LOADED = "loaded"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class Outcome:
    """
    Result of a successful store operation.

    `warning` is set when the operation succeeded in memory but the backing
    file could not be read or written.
    """

    kind: OutcomeKind
    student_id: Optional[int] = None
    count: int = 0
    warning: Optional[str] = None

    @property
    def persisted(self) -> bool:
        return self.warning is None


@dataclass(frozen=True)
class ListingEntry:
    separator: str
    student: Student


class RosterListing:
    """
    Point-in-time view of the roster for display.

    Iterating yields one ListingEntry per student in insertion order. Every
    iteration starts over, so a listing can be rendered more than once.
    """

    def __init__(self, students: Sequence[Student], separator: str = SEPARATOR) -> None:
        self._students: Tuple[Student, ...] = tuple(students)
        self.separator = separator

    def __iter__(self) -> Iterator[ListingEntry]:
        for student in self._students:
            yield ListingEntry(self.separator, student)

    def __len__(self) -> int:
        return len(self._students)

    @property
    def total(self) -> int:
        return len(self._students)

    @property
    def students(self) -> Tuple[Student, ...]:
        return self._students

    def lines(self) -> Iterator[str]:
        """Plain-text rendering: one block per student, then the total."""
        for entry in self:
            yield entry.separator
            yield from entry.student.render().splitlines()
        yield self.separator
        yield f"Total Students: {self.total}"


class StudentStore:
    """
    Ordered, id-unique collection of students persisted to a single file.
    """

    def __init__(self, data_file: Union[str, Path, None] = None) -> None:
        self._path = Path(data_file) if data_file is not None else get_settings().data_file
        self._students: List[Student] = []
        self._state = StoreState.UNINITIALIZED

    @property
    def path(self) -> Path:
        return self._path

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def count(self) -> int:
        self._require_ready()
        return len(self._students)

    def __len__(self) -> int:
        return self.count

    def initialize(self) -> Outcome:
        """
        Load the roster from the backing file and mark the store ready.

        A missing file starts an empty roster. An unreadable or malformed file
        also starts an empty roster, with the reason returned as a warning.
        """
        if self._state is StoreState.READY:
            raise StoreStateError("Store is already initialized")

        warning = self._restore()
        self._state = StoreState.READY
        log.info("Roster ready with %d students from %s", len(self._students), self._path)
        return Outcome(kind=OutcomeKind.LOADED, count=len(self._students), warning=warning)

    def add(self, student: Student) -> Outcome:
        """
        Append `student` and persist the roster.

        Raises DuplicateIdentifierError, without touching memory or the file,
        if a student with the same id is already present.
        """
        self._require_ready()
        for existing in self._students:
            if existing.id == student.id:
                log.info("Rejected duplicate student id %d", student.id)
                raise DuplicateIdentifierError(student.id)

        self._students.append(student)
        log.info("Added student %d", student.id)
        warning = self._persist()
        return Outcome(
            kind=OutcomeKind.ADDED,
            student_id=student.id,
            count=len(self._students),
            warning=warning,
        )

    def remove(self, student_id: int) -> Outcome:
        """
        Remove the first student with `student_id` and persist the roster.

        Raises StudentNotFoundError if there is no such student.
        """
        self._require_ready()
        index = self._index_of(student_id)
        if index is None:
            raise StudentNotFoundError(student_id)

        del self._students[index]
        log.info("Removed student %d", student_id)
        warning = self._persist()
        return Outcome(
            kind=OutcomeKind.REMOVED,
            student_id=student_id,
            count=len(self._students),
            warning=warning,
        )

    def list_all(self) -> RosterListing:
        """
        Return a listing of every student in insertion order.

        Raises EmptyRosterError when there is nothing to display.
        """
        self._require_ready()
        if not self._students:
            raise EmptyRosterError()
        return RosterListing(self._students)

    def find_one(self, student_id: int) -> Student:
        """Return the student with `student_id` or raise StudentNotFoundError."""
        self._require_ready()
        index = self._index_of(student_id)
        if index is None:
            raise StudentNotFoundError(student_id)
        return self._students[index]

    def _index_of(self, student_id: int) -> Optional[int]:
        for index, student in enumerate(self._students):
            if student.id == student_id:
                return index
        return None

    def _require_ready(self) -> None:
        if self._state is not StoreState.READY:
            raise StoreStateError("Store is not initialized; call initialize() first")

    def _persist(self) -> Optional[str]:
        """Write the full roster. Returns a warning message on failure."""
        try:
            write_snapshot(self._path, self._students)
        except PersistenceError as exc:
            log.warning("Roster change kept in memory but not saved: %s", exc)
            return str(exc)
        return None

    def _restore(self) -> Optional[str]:
        """Replace in-memory state with the backing file. Returns a warning on failure."""
        try:
            loaded = read_snapshot(self._path)
        except PersistenceError as exc:
            log.warning("Starting with an empty roster: %s", exc)
            self._students = []
            return str(exc)
        self._students = loaded if loaded is not None else []
        return None


__all__ = [
    "StudentStore",
    "StoreState",
    "Outcome",
    "OutcomeKind",
    "RosterListing",
    "ListingEntry",
    "SEPARATOR",
]
