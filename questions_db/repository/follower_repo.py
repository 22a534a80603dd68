from __future__ import annotations

from sqlite3 import Connection, Row
from typing import List


def followers_for_question(conn: Connection, question_id: int) -> List[Row]:
    sql = """
    SELECT u.*
    FROM question_followers AS qf
    JOIN users AS u ON qf.user_id = u.user_id
    WHERE qf.question_id = ?
    """
    return conn.execute(sql, (question_id,)).fetchall()


def questions_followed_by(conn: Connection, user_id: int) -> List[Row]:
    sql = """
    SELECT q.*
    FROM question_followers AS qf
    JOIN questions AS q ON qf.question_id = q.question_id
    WHERE qf.user_id = ?
    """
    return conn.execute(sql, (user_id,)).fetchall()


def most_followed(conn: Connection, n: int) -> List[Row]:
    # ties keep SQLite's natural group order, which is not guaranteed
    sql = """
    SELECT q.*
    FROM question_followers AS qf
    JOIN questions AS q ON qf.question_id = q.question_id
    GROUP BY qf.question_id
    ORDER BY COUNT(qf.user_id) DESC
    LIMIT ?
    """
    return conn.execute(sql, (n,)).fetchall()
