from __future__ import annotations

from sqlite3 import Connection, Row
from typing import List, Optional


def get_by_id(conn: Connection, reply_id: int) -> Optional[Row]:
    return conn.execute("SELECT * FROM replies WHERE replies.id = ?", (reply_id,)).fetchone()


def list_by_author(conn: Connection, user_id: int) -> List[Row]:
    return conn.execute("SELECT * FROM replies WHERE replies.author_id = ?", (user_id,)).fetchall()


def list_by_question(conn: Connection, question_id: int) -> List[Row]:
    return conn.execute(
        "SELECT * FROM replies WHERE replies.question_id = ?", (question_id,)
    ).fetchall()


def list_children(conn: Connection, parent_id: int) -> List[Row]:
    return conn.execute(
        "SELECT * FROM replies WHERE replies.parent_id = ?", (parent_id,)
    ).fetchall()


def get_author(conn: Connection, author_id: int) -> Optional[Row]:
    # only resolves when at least one reply by this author exists
    sql = """
    SELECT u.*
    FROM users AS u
    WHERE u.user_id = (
      SELECT r.author_id FROM replies AS r WHERE r.author_id = ? LIMIT 1
    )
    """
    return conn.execute(sql, (author_id,)).fetchone()


def insert(conn: Connection, reply: str, author_id: int, question_id: int,
           parent_id: Optional[int]) -> int:
    cur = conn.execute(
        "INSERT INTO replies(reply, author_id, question_id, parent_id) VALUES(?, ?, ?, ?)",
        (reply, author_id, question_id, parent_id),
    )
    return cur.lastrowid


def update(conn: Connection, reply_id: int, reply: str):
    conn.execute("UPDATE replies SET reply = ? WHERE id = ?", (reply, reply_id))
