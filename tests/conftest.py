"""
Pytest configuration for the student roster.

Provides fixtures for:
- Isolated backing files under tmp_path
- Initialized stores
- Settings cache reset and logging cleanup between tests
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Generator

import pytest

from roster.config import get_settings
from roster.domain.models import Student
from roster.store import StudentStore


@pytest.fixture(autouse=True)
def _isolate_settings() -> Generator[None, None, None]:
    """
    Clear the cached Settings so environment overrides apply per test.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_handlers() -> Generator[None, None, None]:
    """
    CLI invocations call configure_logging, which binds a plain StreamHandler
    to the runner's stderr. Drop those once the test is done.
    """
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """
    Backing file path that does not exist yet.
    """
    return tmp_path / "students.json"


@pytest.fixture
def store(data_file: Path) -> StudentStore:
    """
    Initialized store over an empty backing file.
    """
    store = StudentStore(data_file)
    store.initialize()
    return store


@pytest.fixture
def ann() -> Student:
    return Student(id=1, name="Ann", age=20, course="CS")


@pytest.fixture
def bo() -> Student:
    return Student(id=2, name="Bo", age=22, course="Math")
