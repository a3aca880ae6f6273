from pathlib import Path

from roster import config
from roster.store import StudentStore
from scripts import seed_roster


def test_get_settings_defaults(monkeypatch, tmp_path: Path):
    for name in ("ROSTER_DATA_FILE", "APP_ENV", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    settings = config.get_settings()

    assert settings.data_file == Path("students.json")
    assert settings.app_env == "development"
    assert settings.log_level == "WARNING"
    assert settings.json_logs is False


def test_get_settings_reads_environment(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("ROSTER_DATA_FILE", str(tmp_path / "roster.json"))
    monkeypatch.setenv("LOG_JSON", "true")

    settings = config.get_settings()

    assert settings.data_file == tmp_path / "roster.json"
    assert settings.json_logs is True


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_generate_students_is_deterministic():
    first = seed_roster._generate_students(5, seed=123)
    second = seed_roster._generate_students(5, seed=123)

    assert first == second
    assert [s.id for s in first] == [1, 2, 3, 4, 5]
    assert all(s.course in seed_roster.COURSES for s in first)


def test_seed_store_skips_existing_ids(store: StudentStore):
    students = seed_roster._generate_students(3, seed=7)
    assert seed_roster._seed_store(store, students) == (3, 0)

    overlapping = seed_roster._generate_students(3, seed=7, start_id=3)
    added, skipped = seed_roster._seed_store(store, overlapping)

    assert (added, skipped) == (2, 1)
    assert store.count == 5
