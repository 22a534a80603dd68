"""
Create the questions tables and optionally load a small demo dataset.

Usage:
  python -m questions_db.scripts.init_db [--db PATH] [--seed]
"""
from __future__ import annotations

import argparse
from questions_db.db import get_conn
from questions_db.logs import LogContext, ensure_log_schema
from questions_db.models import Question, Reply, User
from questions_db.schema import ensure_schema


def seed(conn) -> dict:
    ada = User(fname="Ada", lname="Lovelace").save(conn)
    alan = User(fname="Alan", lname="Turing").save(conn)
    grace = User(fname="Grace", lname="Hopper").save(conn)

    q1 = Question(title="Engines", body="Can the engine compose music?", author_id=ada.user_id).save(conn)
    q2 = Question(title="Machines", body="Can machines think?", author_id=alan.user_id).save(conn)

    top = Reply(reply="Given the right notation, yes.", author_id=alan.user_id,
                question_id=q1.question_id).save(conn)
    Reply(reply="Compilers agree.", author_id=grace.user_id,
          question_id=q1.question_id, parent_id=top.id).save(conn)

    conn.executemany(
        "INSERT INTO question_followers(question_id, user_id) VALUES(?, ?)",
        [(q1.question_id, alan.user_id), (q1.question_id, grace.user_id), (q2.question_id, ada.user_id)],
    )
    conn.executemany(
        "INSERT INTO question_likes(question_id, user_id) VALUES(?, ?)",
        [(q1.question_id, alan.user_id), (q1.question_id, grace.user_id), (q2.question_id, grace.user_id)],
    )
    cur = conn.execute("INSERT INTO tags(tag) VALUES('history')")
    conn.executemany(
        "INSERT INTO question_tags(tag_id, question_id) VALUES(?, ?)",
        [(cur.lastrowid, q1.question_id), (cur.lastrowid, q2.question_id)],
    )
    return {"users": 3, "questions": 2, "replies": 2}


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--db", default=None, help="database file; defaults to the configured path")
    ap.add_argument("--seed", action="store_true", help="insert demo rows after creating tables")
    args = ap.parse_args(argv)

    with get_conn(args.db) as conn:
        ensure_schema(conn)
        res = seed(conn) if args.seed else {}

    ensure_log_schema(args.db)
    log = LogContext("INIT_DB", user="script", db_path=args.db)
    log.set_payload({"seed": args.seed})
    log.set_after(res)
    log.write("OK")
    print({"message": "ok", **res})


if __name__ == "__main__":
    main()
