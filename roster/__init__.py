"""
Student Roster - a small console application for managing student records.

The package provides:

- An immutable Student record
- A StudentStore that enforces unique ids and persists the whole roster to a
  single JSON file after every change
- A typer CLI with an interactive menu and one-shot commands
- Rich console rendering of listings and outcomes
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from roster.config import Settings, get_settings
from roster.domain.models import RosterSnapshot, Student
from roster.errors import (
    DuplicateIdentifierError,
    EmptyRosterError,
    PersistenceError,
    RosterError,
    StoreStateError,
    StudentNotFoundError,
)
from roster.store import (
    ListingEntry,
    Outcome,
    OutcomeKind,
    RosterListing,
    StoreState,
    StudentStore,
)
from roster.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Student",
    "RosterSnapshot",
    # Store
    "StudentStore",
    "StoreState",
    "Outcome",
    "OutcomeKind",
    "RosterListing",
    "ListingEntry",
    # Errors
    "RosterError",
    "DuplicateIdentifierError",
    "StudentNotFoundError",
    "EmptyRosterError",
    "PersistenceError",
    "StoreStateError",
    # Logging
    "configure_logging",
    "get_logger",
]
