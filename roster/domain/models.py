"""
Domain models for the student roster.

Defines the student record and the on-disk snapshot of the whole roster.
Both are pydantic models so the backing file is validated on the way in.
"""
from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, Field, model_validator

SNAPSHOT_VERSION = 1

LABEL_WIDTH = 6


class Student(BaseModel):
    """
    A single student on the roster. Immutable once constructed.
    """

    id: int = Field(..., description="Caller-supplied natural key, unique per roster.")
    name: str = Field(..., description="Display name.")
    age: int = Field(..., description="Age in years.")
    course: str = Field(..., description="Course the student is enrolled in.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def display_fields(self) -> List[Tuple[str, str]]:
        """Labeled values in display order."""
        return [
            ("ID", str(self.id)),
            ("Name", self.name),
            ("Age", str(self.age)),
            ("Course", self.course),
        ]

    def render(self) -> str:
        """
        Render the student as labeled lines, e.g.::

            ID     : 1
            Name   : Ann
            Age    : 20
            Course : CS
        """
        return "\n".join(
            f"{label:<{LABEL_WIDTH}} : {value}" for label, value in self.display_fields()
        )


class RosterSnapshot(BaseModel):
    """
    Serialized form of the entire roster, as stored in the backing file.

    The student count is not persisted; it is always len(students).
    """

    version: int = Field(SNAPSHOT_VERSION, description="Snapshot format version.")
    students: List[Student] = Field(default_factory=list)

    @model_validator(mode="after")
    def _ids_are_unique(self) -> "RosterSnapshot":
        seen: set[int] = set()
        for student in self.students:
            if student.id in seen:
                raise ValueError(f"duplicate student id {student.id} in snapshot")
            seen.add(student.id)
        return self


__all__ = ["Student", "RosterSnapshot", "SNAPSHOT_VERSION", "LABEL_WIDTH"]
