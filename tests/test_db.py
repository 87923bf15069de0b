import sqlite3

import pytest

from travel_api.app.core import db
from travel_api.app.core.config import settings
from travel_api.app.core.db import MIGRATIONS, get_cursor, get_database_path, init_db


def test_absolute_path_used_as_is(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "a.db"))
    assert get_database_path() == str((tmp_path / "a.db").resolve())


def test_sqlite_url_prefix_stripped(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "database_url", f"sqlite:///{tmp_path / 'b.db'}")
    assert get_database_path() == str((tmp_path / "b.db").resolve())


def test_relative_path_resolved_against_package(monkeypatch):
    monkeypatch.setattr(settings, "database_url", "data/travel.db")
    assert get_database_path() == str((db.PACKAGE_ROOT / "data" / "travel.db").resolve())


def test_init_db_is_idempotent():
    latest = MIGRATIONS[-1][0]
    assert init_db() == latest
    assert init_db() == latest
    with get_cursor() as cursor:
        versions = [row["version"] for row in cursor.execute("SELECT version FROM migrations ORDER BY version")]
    assert versions == [version for version, _ in MIGRATIONS]


def test_failed_migration_leaves_no_trace(monkeypatch):
    broken = MIGRATIONS + [
        (99, "CREATE TABLE Half (Id INTEGER); INSERT INTO Nowhere VALUES (1);"),
    ]
    monkeypatch.setattr(db, "MIGRATIONS", broken)

    with pytest.raises(sqlite3.OperationalError):
        init_db()

    with get_cursor() as cursor:
        assert cursor.execute("SELECT MAX(version) AS v FROM migrations").fetchone()["v"] == MIGRATIONS[-1][0]
        assert cursor.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'Half'"
        ).fetchone() is None


def test_get_cursor_rolls_back_on_error():
    with pytest.raises(RuntimeError):
        with get_cursor() as cursor:
            cursor.execute("INSERT INTO Country (Name) VALUES ('Atlantis')")
            raise RuntimeError("boom")

    with get_cursor() as cursor:
        assert cursor.execute("SELECT COUNT(*) AS total FROM Country").fetchone()["total"] == 0
