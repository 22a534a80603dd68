from __future__ import annotations

from sqlite3 import Connection, Row
from typing import List, Optional


def get_by_id(conn: Connection, question_id: int) -> Optional[Row]:
    return conn.execute(
        "SELECT * FROM questions WHERE questions.question_id = ?", (question_id,)
    ).fetchone()


def list_by_author(conn: Connection, author_id: int) -> List[Row]:
    return conn.execute(
        "SELECT * FROM questions WHERE questions.author_id = ?", (author_id,)
    ).fetchall()


def get_author(conn: Connection, author_id: int) -> Optional[Row]:
    # only resolves when at least one question by this author exists
    sql = """
    SELECT u.*
    FROM users AS u
    WHERE u.user_id = (
      SELECT q.author_id FROM questions AS q WHERE q.author_id = ? LIMIT 1
    )
    """
    return conn.execute(sql, (author_id,)).fetchone()


def insert(conn: Connection, title: str, body: str, author_id: int) -> int:
    cur = conn.execute(
        "INSERT INTO questions(title, body, author_id) VALUES(?, ?, ?)",
        (title, body, author_id),
    )
    return cur.lastrowid


def update(conn: Connection, question_id: int, title: str, body: str):
    conn.execute(
        "UPDATE questions SET title = ?, body = ? WHERE question_id = ?",
        (title, body, question_id),
    )
