"""
Sample data script for the student roster.

Generates a deterministic pseudo-random roster and adds it through the
StudentStore, so the backing file is written exactly as the CLI would.
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

import typer

from roster.config import get_settings
from roster.domain.models import Student
from roster.errors import DuplicateIdentifierError
from roster.store import StudentStore
from roster.utils.logging import configure_logging

app = typer.Typer(help="Seed the student roster with generated students.")

FIRST_NAMES = ["Ann", "Bo", "Chen", "Dara", "Eli", "Fatima", "Goran", "Hana", "Ivo", "Jun"]
LAST_NAMES = ["Silva", "Okafor", "Novak", "Kim", "Haddad", "Berg", "Rossi", "Sato"]
COURSES = ["CS", "Math", "Physics", "Biology", "History", "Economics"]


def _generate_students(count: int, seed: int, start_id: int = 1) -> list[Student]:
    rng = random.Random(seed)
    students: list[Student] = []
    for offset in range(count):
        students.append(
            Student(
                id=start_id + offset,
                name=f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
                age=rng.randint(17, 35),
                course=rng.choice(COURSES),
            )
        )
    return students


def _seed_store(store: StudentStore, students: list[Student]) -> tuple[int, int]:
    """Add each student, skipping ids already present. Returns (added, skipped)."""
    added = skipped = 0
    for student in students:
        try:
            outcome = store.add(student)
        except DuplicateIdentifierError:
            skipped += 1
            continue
        if outcome.warning:
            typer.echo(f"Warning: {outcome.warning}", err=True)
        added += 1
    return added, skipped


@app.command()
def main(
    count: int = typer.Option(
        10,
        "--count",
        "-n",
        help="Number of students to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    start_id: int = typer.Option(
        1,
        "--start-id",
        help="Id of the first generated student.",
    ),
    data_file: Path | None = typer.Option(
        None,
        "--data-file",
        "-f",
        help="Backing file to seed (default from settings).",
    ),
) -> None:
    """
    Generate students and add them to the roster.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    store = StudentStore(data_file or settings.data_file)
    loaded = store.initialize()
    if loaded.warning:
        typer.echo(f"Warning: {loaded.warning}", err=True)

    typer.echo(f"Generating {count} students -> {store.path} (seed={seed}, start_id={start_id})")
    added, skipped = _seed_store(store, _generate_students(count, seed=seed, start_id=start_id))
    typer.echo(f"Added {added} students, skipped {skipped} existing ids. Roster size: {store.count}.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
