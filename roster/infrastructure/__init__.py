"""
Infrastructure package for the student roster.

Centralizes file I/O for the backing file. Keep this layer focused on
serialization and resource handling, decoupled from store logic.
"""

from roster.infrastructure.backing_file import read_snapshot, write_snapshot

__all__ = [
    "read_snapshot",
    "write_snapshot",
]
