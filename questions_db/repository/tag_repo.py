from __future__ import annotations

from sqlite3 import Connection, Row
from typing import List, Optional


def get_by_id(conn: Connection, tag_id: int) -> Optional[Row]:
    return conn.execute("SELECT * FROM tags WHERE tags.tag_id = ?", (tag_id,)).fetchone()


def most_popular(conn: Connection) -> List[Row]:
    """
    For each tag, the tagged question with the most likes.

    Relies on SQLite's bare-column rule for MAX(): title/body/author_id come
    from the row holding the maximum. Which question wins a tie is arbitrary.
    Tags whose questions have no likes at all are absent from the result.
    """
    sql = """
    SELECT t.tag, z.title, z.body, z.author_id, z.likes
    FROM tags AS t
    JOIN (
      SELECT
        qt.tag_id AS tag_id,
        y.title AS title,
        y.body AS body,
        y.author_id AS author_id,
        MAX(y.likes) AS likes
      FROM question_tags AS qt
      JOIN (
        SELECT q.*, COUNT(ql.user_id) AS likes
        FROM question_likes AS ql
        JOIN questions AS q ON ql.question_id = q.question_id
        GROUP BY ql.question_id
      ) AS y ON qt.question_id = y.question_id
      GROUP BY qt.tag_id
    ) AS z ON t.tag_id = z.tag_id
    ORDER BY t.tag_id
    """
    return conn.execute(sql).fetchall()
