"""
Backing file codec: whole-roster snapshots on disk.

The roster is always read and written as one JSON document. Writes go to a
sibling temporary file that is then renamed over the target, so a crash
mid-write leaves the previous snapshot intact.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from roster.domain.models import SNAPSHOT_VERSION, RosterSnapshot, Student
from roster.errors import PersistenceError
from roster.utils.logging import get_logger

log = get_logger(__name__)


def _temp_path(path: Path) -> Path:
    return path.with_name(path.name + ".tmp")


def read_snapshot(path: Path) -> Optional[List[Student]]:
    """
    Load the full roster from `path`.

    Returns None when the file does not exist. Raises PersistenceError when it
    exists but cannot be read or decoded.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log.debug("No backing file at %s", path)
        return None
    except (OSError, UnicodeDecodeError) as exc:
        raise PersistenceError(f"Error loading data: {exc}", path=path) from exc
    try:
        snapshot = RosterSnapshot.model_validate_json(raw)
    except ValidationError as exc:
        raise PersistenceError(f"Error loading data: {exc}", path=path) from exc
    return list(snapshot.students)


def write_snapshot(path: Path, students: Sequence[Student]) -> None:
    """
    Replace the backing file with a snapshot of `students`.

    Raises PersistenceError if the snapshot cannot be written.
    """
    snapshot = RosterSnapshot(version=SNAPSHOT_VERSION, students=list(students))
    try:
        # Names and courses may carry lone surrogates from undecodable argv bytes.
        payload = snapshot.model_dump_json(indent=2).encode("utf-8")
    except (PydanticSerializationError, ValueError) as exc:
        reason = str(exc).encode("utf-8", "backslashreplace").decode("utf-8")
        raise PersistenceError(f"Error saving data: {reason}", path=path) from exc

    tmp = _temp_path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_bytes(payload)
        tmp.replace(path)
    except OSError as exc:
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            log.debug("Could not remove temporary file %s", tmp)
        raise PersistenceError(f"Error saving data: {exc}", path=path) from exc
    log.debug("Wrote %d students to %s", len(snapshot.students), path)


__all__ = ["read_snapshot", "write_snapshot"]
