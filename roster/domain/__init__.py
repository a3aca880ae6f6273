"""
Domain package for the student roster.

Exports the core domain models used by the store and the CLI.
Keep this package focused on data definitions and validation concerns.
"""

from roster.domain.models import SNAPSHOT_VERSION, RosterSnapshot, Student

__all__ = [
    "Student",
    "RosterSnapshot",
    "SNAPSHOT_VERSION",
]
