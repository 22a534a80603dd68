from __future__ import annotations

from sqlite3 import Connection, Row
from typing import List, Optional


def likers_for_question(conn: Connection, question_id: int) -> List[Row]:
    sql = """
    SELECT u.*
    FROM users AS u
    JOIN (
      SELECT ql.*
      FROM question_likes AS ql
      JOIN questions AS q ON ql.question_id = q.question_id
      WHERE ql.question_id = ?
    ) AS x ON u.user_id = x.user_id
    """
    return conn.execute(sql, (question_id,)).fetchall()


def count_for_question(conn: Connection, question_id: int) -> Optional[int]:
    # GROUP BY drops the empty group: a question with no likes gives no row
    sql = """
    SELECT COUNT(user_id) AS num
    FROM question_likes AS ql
    WHERE ql.question_id = ?
    GROUP BY ql.question_id
    """
    row = conn.execute(sql, (question_id,)).fetchone()
    return None if row is None else row["num"]


def questions_liked_by(conn: Connection, user_id: int) -> List[Row]:
    sql = """
    SELECT q.*
    FROM questions AS q
    JOIN (
      SELECT ql.*
      FROM question_likes AS ql
      JOIN users AS u ON ql.user_id = u.user_id
      WHERE ql.user_id = ?
    ) AS x ON q.question_id = x.question_id
    """
    return conn.execute(sql, (user_id,)).fetchall()


def most_liked(conn: Connection, n: int) -> List[Row]:
    # ties keep SQLite's natural group order, which is not guaranteed
    sql = """
    SELECT q.*
    FROM question_likes AS ql
    JOIN questions AS q ON ql.question_id = q.question_id
    GROUP BY ql.question_id
    ORDER BY COUNT(ql.user_id) DESC
    LIMIT ?
    """
    return conn.execute(sql, (n,)).fetchall()
