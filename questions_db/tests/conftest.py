import os
import sys
import sqlite3
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from questions_db.schema import DDL, TABLES


@pytest.fixture(scope="session")
def tmp_db_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("db") / "questions_test.db"
    # Point the package to this temp DB
    os.environ["QUESTIONS_DB_PATH"] = str(path)
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(DDL)
        conn.commit()
    finally:
        conn.close()
    return str(path)


@pytest.fixture()
def conn(tmp_db_path):
    from questions_db.db import get_conn
    with get_conn() as c:
        yield c


@pytest.fixture()
def client(tmp_db_path):
    from questions_db.logs import ensure_log_schema
    ensure_log_schema()
    from questions_db.api import app
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture(autouse=True)
def _clean_db(tmp_db_path):
    # Clean tables before each test for isolation
    # Safety: ensure we only ever wipe the temp DB, never a real one
    assert os.environ.get("QUESTIONS_DB_PATH") == tmp_db_path, "Refusing to clean non-temp DB"
    conn = sqlite3.connect(tmp_db_path)
    try:
        for t in TABLES + ["operation_log", "sqlite_sequence"]:
            try:
                conn.execute(f"DELETE FROM {t}")
            except sqlite3.OperationalError:
                pass
        conn.commit()
    finally:
        conn.close()
    yield
