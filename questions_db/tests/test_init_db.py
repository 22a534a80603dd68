from __future__ import annotations

from questions_db.db import get_conn
from questions_db.logs import ensure_log_schema, search_logs
from questions_db.models import Question, Tag, User
from questions_db.scripts.init_db import main


def test_init_db_with_seed(tmp_path, capsys):
    path = str(tmp_path / "fresh.db")
    main(["--db", path, "--seed"])
    assert "ok" in capsys.readouterr().out

    with get_conn(path) as conn:
        ada = User.find_by_name(conn, "Ada", "Lovelace")
        assert ada is not None
        assert [q.title for q in ada.authored_questions(conn)] == ["Engines"]
        top = Question.most_liked(conn, 1)
        assert top[0].title == "Engines"
        assert [p.title for p in Tag.most_popular(conn)] == ["Engines"]


def test_init_db_is_idempotent_without_seed(tmp_path):
    path = str(tmp_path / "empty.db")
    main(["--db", path])
    main(["--db", path])
    with get_conn(path) as conn:
        assert conn.execute("SELECT COUNT(1) AS c FROM users").fetchone()["c"] == 0


def test_init_db_logs_into_the_target_database(tmp_path):
    path = str(tmp_path / "logged.db")
    main(["--db", path, "--seed"])

    total, items = search_logs(None, "INIT_DB", None, None, 1, 10, db_path=path)
    assert total == 1
    assert items[0]["user"] == "script"
    assert '"users": 3' in items[0]["after_json"]

    # the configured database did not receive the entry
    ensure_log_schema()
    assert search_logs(None, "INIT_DB", None, None, 1, 10)[0] == 0
