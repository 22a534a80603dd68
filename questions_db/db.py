from __future__ import annotations

# questions_db/db.py
import sqlite3
from contextlib import contextmanager
from typing import Iterator
import logging
import os
import yaml

from .errors import DatabaseConnectionError

logger = logging.getLogger(__name__)

# DB path resolution order:
# 1) env QUESTIONS_DB_PATH (highest priority)
# 2) config.yaml test_db_path (when running under tests)
# 3) config.yaml db_path
# 4) fallback: user_questions.db at the project root
_PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
_DEFAULT_DB = os.path.join(_PROJECT_ROOT, "user_questions.db")


def _read_config_yaml() -> dict:
    cfg_path = os.path.join(_PROJECT_ROOT, "config.yaml")
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"ignoring unreadable config.yaml: {e}")
        return {}
    if not isinstance(cfg, dict):
        return {}
    out = {}
    for k in ("db_path", "test_db_path"):
        v = cfg.get(k)
        if isinstance(v, str) and v.strip():
            out[k] = v.strip()
    return out


def _resolve_db_path() -> str:
    env_path = os.environ.get("QUESTIONS_DB_PATH")
    cfg = _read_config_yaml()
    cfg_db = cfg.get("db_path")
    cfg_test = cfg.get("test_db_path")
    is_test = (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)

    if env_path:
        path = env_path
    elif is_test and cfg_test:
        path = cfg_test
    elif cfg_db:
        path = cfg_db
    else:
        path = _DEFAULT_DB
    return path


def _ensure_parent_dir(path: str):
    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)


def get_db_path() -> str:
    path = _resolve_db_path()
    _ensure_parent_dir(path)
    return path


def connect(db_path: str | None = None) -> sqlite3.Connection:
    """
    Open a SQLite connection to the questions database.

    Rows come back as sqlite3.Row (keyed by column name) and declared column
    types are converted. Statements autocommit; there is no transaction
    management here. The caller owns the connection and must close it.

    Raises:
        DatabaseConnectionError: the file cannot be opened or created.
    """
    path = db_path or _resolve_db_path()
    try:
        if not db_path:
            _ensure_parent_dir(path)
        conn = sqlite3.connect(
            path,
            detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
            check_same_thread=False,
            isolation_level=None,
        )
        conn.execute("PRAGMA foreign_keys = ON;")
    except (sqlite3.Error, OSError) as e:
        logger.error(f"Failed to open database {path}: {e}")
        raise DatabaseConnectionError(path, e) from e
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_conn(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    """
    Yield a connection from connect() and always close it afterwards.
    """
    conn = connect(db_path)
    try:
        yield conn
    finally:
        conn.close()
