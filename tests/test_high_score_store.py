"""
Tests for the persisted high-score stores.
"""

import sqlite3

import pytest

from snake_engine.data_access import (
    HighScoreRepository,
    InMemoryHighScoreStore,
    get_database_path,
)


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "scores.db")


class TestDatabasePath:

    def test_explicit_path_wins(self, monkeypatch):
        monkeypatch.setenv("SNAKE_DB_PATH", "/env/path.db")
        assert get_database_path("/explicit.db") == "/explicit.db"

    def test_env_path(self, monkeypatch):
        monkeypatch.setenv("SNAKE_DB_PATH", "/env/path.db")
        assert get_database_path() == "/env/path.db"

    def test_data_dir(self, monkeypatch, tmp_path):
        monkeypatch.delenv("SNAKE_DB_PATH", raising=False)
        monkeypatch.setenv("SNAKE_DATA_DIR", str(tmp_path / "data"))
        assert get_database_path() == str(tmp_path / "data" / "snake_engine.db")
        assert (tmp_path / "data").is_dir()

    def test_default_is_cwd(self, monkeypatch, tmp_path):
        monkeypatch.delenv("SNAKE_DB_PATH", raising=False)
        monkeypatch.delenv("SNAKE_DATA_DIR", raising=False)
        monkeypatch.chdir(tmp_path)
        assert get_database_path() == str(tmp_path / "snake_engine.db")


class TestHighScoreRepository:

    def test_defaults_to_zero(self, db_path):
        assert HighScoreRepository(db_path).get() == 0

    def test_set_and_get(self, db_path):
        repo = HighScoreRepository(db_path)
        repo.set(42)
        assert repo.get() == 42
        # Persisted across instances
        assert HighScoreRepository(db_path).get() == 42

    def test_never_decreases(self, db_path):
        repo = HighScoreRepository(db_path)
        repo.set(42)
        repo.set(10)
        assert repo.get() == 42

    def test_boards_are_independent(self, db_path):
        HighScoreRepository(db_path, board="a").set(5)
        assert HighScoreRepository(db_path, board="b").get() == 0

    def test_reset(self, db_path):
        repo = HighScoreRepository(db_path)
        repo.set(42)
        repo.reset()
        assert repo.get() == 0

    def test_negative_score_rejected(self, db_path):
        with pytest.raises(ValueError):
            HighScoreRepository(db_path).set(-1)

    def test_schema_created(self, db_path):
        HighScoreRepository(db_path)
        conn = sqlite3.connect(db_path)
        try:
            tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
        finally:
            conn.close()
        assert "high_scores" in tables


class TestInMemoryStore:

    def test_monotonic(self):
        store = InMemoryHighScoreStore()
        assert store.get() == 0
        store.set(9)
        store.set(4)
        assert store.get() == 9
        store.reset()
        assert store.get() == 0
