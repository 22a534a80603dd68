from __future__ import annotations

import sqlite3

import pytest

from questions_db import db
from questions_db.db import connect, get_conn, get_db_path
from questions_db.errors import DatabaseConnectionError, QuestionsDBError


def _write_config(root, text):
    (root / "config.yaml").write_text(text, encoding="utf-8")


def test_env_path_wins(monkeypatch, tmp_path):
    target = tmp_path / "env" / "q.db"
    _write_config(tmp_path, f"db_path: {tmp_path / 'cfg.db'}\n")
    monkeypatch.setattr(db, "_PROJECT_ROOT", str(tmp_path))
    monkeypatch.setenv("QUESTIONS_DB_PATH", str(target))
    assert get_db_path() == str(target)
    # parent directory is created on resolution
    assert (tmp_path / "env").is_dir()


def test_test_db_path_used_under_pytest(monkeypatch, tmp_path):
    _write_config(
        tmp_path,
        f"db_path: {tmp_path / 'prod.db'}\ntest_db_path: {tmp_path / 'test.db'}\n",
    )
    monkeypatch.setattr(db, "_PROJECT_ROOT", str(tmp_path))
    monkeypatch.delenv("QUESTIONS_DB_PATH", raising=False)
    assert get_db_path() == str(tmp_path / "test.db")


def test_config_db_path(monkeypatch, tmp_path):
    _write_config(tmp_path, f"db_path: {tmp_path / 'prod.db'}\n")
    monkeypatch.setattr(db, "_PROJECT_ROOT", str(tmp_path))
    monkeypatch.delenv("QUESTIONS_DB_PATH", raising=False)
    assert get_db_path() == str(tmp_path / "prod.db")


def test_fallback_default_when_no_config(monkeypatch, tmp_path):
    monkeypatch.setattr(db, "_PROJECT_ROOT", str(tmp_path))
    monkeypatch.delenv("QUESTIONS_DB_PATH", raising=False)
    assert get_db_path().endswith("user_questions.db")


def test_broken_yaml_is_ignored(monkeypatch, tmp_path):
    _write_config(tmp_path, "db_path: [unclosed\n")
    monkeypatch.setattr(db, "_PROJECT_ROOT", str(tmp_path))
    monkeypatch.delenv("QUESTIONS_DB_PATH", raising=False)
    assert get_db_path().endswith("user_questions.db")


def test_rows_are_keyed_and_typed(tmp_db_path):
    with get_conn() as conn:
        conn.execute("INSERT INTO users(fname, lname) VALUES('Ada', 'Lovelace')")
        row = conn.execute("SELECT * FROM users").fetchone()
        assert isinstance(row, sqlite3.Row)
        assert row["fname"] == "Ada"
        assert isinstance(row["user_id"], int)


def test_statements_autocommit(tmp_db_path):
    with get_conn() as conn:
        conn.execute("INSERT INTO users(fname, lname) VALUES('Grace', 'Hopper')")
    with get_conn() as other:
        n = other.execute("SELECT COUNT(1) AS c FROM users").fetchone()["c"]
    assert n == 1


def test_unopenable_file_raises_connection_error(tmp_path):
    missing = tmp_path / "no_such_dir" / "q.db"
    with pytest.raises(DatabaseConnectionError) as exc:
        connect(str(missing))
    assert isinstance(exc.value, QuestionsDBError)
    assert exc.value.path == str(missing)
    assert isinstance(exc.value.cause, sqlite3.Error)


def test_get_conn_closes(tmp_db_path):
    with get_conn() as conn:
        pass
    with pytest.raises(sqlite3.ProgrammingError):
        conn.execute("SELECT 1")


def test_configured_dir_under_a_file_raises_connection_error(monkeypatch, tmp_path):
    blocker = tmp_path / "afile"
    blocker.write_text("not a directory", encoding="utf-8")
    target = blocker / "sub" / "q.db"
    monkeypatch.setenv("QUESTIONS_DB_PATH", str(target))
    with pytest.raises(DatabaseConnectionError) as exc:
        connect()
    assert exc.value.path == str(target)
    assert isinstance(exc.value.cause, OSError)
    with pytest.raises(DatabaseConnectionError):
        with get_conn():
            pass
