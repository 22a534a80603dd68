from __future__ import annotations

from sqlite3 import Connection, Row
from typing import Optional


def get_by_name(conn: Connection, fname: str, lname: str) -> Optional[Row]:
    return conn.execute(
        "SELECT * FROM users WHERE users.fname = ? AND users.lname = ?",
        (fname, lname),
    ).fetchone()


def get_by_id(conn: Connection, user_id: int) -> Optional[Row]:
    return conn.execute("SELECT * FROM users WHERE users.user_id = ?", (user_id,)).fetchone()


def insert(conn: Connection, fname: str, lname: str) -> int:
    cur = conn.execute("INSERT INTO users(fname, lname) VALUES(?, ?)", (fname, lname))
    return cur.lastrowid


def update(conn: Connection, user_id: int, fname: str, lname: str):
    conn.execute(
        "UPDATE users SET fname = ?, lname = ? WHERE user_id = ?",
        (fname, lname, user_id),
    )


def average_karma(conn: Connection):
    """
    Average like count per question of author 1.

    The author id is a literal in the SQL, not a parameter: every caller gets
    author 1's karma. Likes are LEFT JOINed and grouped by the like row's
    question_id, so all unliked questions fall into a single NULL group.
    Returns 0 when author 1 has no questions.
    """
    sql = """
    SELECT
      CASE WHEN COUNT(x.q_id) = 0
        THEN 0
        ELSE CAST(SUM(x.lc) AS FLOAT) / COUNT(x.q_id)
      END AS avg
    FROM (
      SELECT COUNT(ql.user_id) AS lc, q.question_id AS q_id
      FROM questions AS q
      LEFT JOIN question_likes AS ql ON ql.question_id = q.question_id
      WHERE q.author_id = 1
      GROUP BY ql.question_id
    ) AS x
    """
    row = conn.execute(sql).fetchone()
    return None if row is None else row["avg"]
