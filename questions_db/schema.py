"""DDL for the questions database tables.

Schema ownership normally sits outside this package; ensure_schema exists so
tests and scripts/init_db can build a fresh database file.
"""
from __future__ import annotations

from sqlite3 import Connection

DDL = """
CREATE TABLE IF NOT EXISTS users (
  user_id INTEGER PRIMARY KEY AUTOINCREMENT,
  fname TEXT NOT NULL,
  lname TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS questions (
  question_id INTEGER PRIMARY KEY AUTOINCREMENT,
  title TEXT NOT NULL,
  body TEXT NOT NULL,
  author_id INTEGER NOT NULL,
  FOREIGN KEY (author_id) REFERENCES users(user_id)
);

CREATE TABLE IF NOT EXISTS question_followers (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  question_id INTEGER NOT NULL,
  user_id INTEGER NOT NULL,
  FOREIGN KEY (question_id) REFERENCES questions(question_id),
  FOREIGN KEY (user_id) REFERENCES users(user_id)
);

CREATE TABLE IF NOT EXISTS replies (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  reply TEXT NOT NULL,
  author_id INTEGER NOT NULL,
  question_id INTEGER NOT NULL,
  parent_id INTEGER,
  FOREIGN KEY (author_id) REFERENCES users(user_id),
  FOREIGN KEY (question_id) REFERENCES questions(question_id),
  FOREIGN KEY (parent_id) REFERENCES replies(id)
);

CREATE TABLE IF NOT EXISTS question_likes (
  question_id INTEGER NOT NULL,
  user_id INTEGER NOT NULL,
  FOREIGN KEY (question_id) REFERENCES questions(question_id),
  FOREIGN KEY (user_id) REFERENCES users(user_id)
);

CREATE TABLE IF NOT EXISTS tags (
  tag_id INTEGER PRIMARY KEY AUTOINCREMENT,
  tag TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS question_tags (
  tag_id INTEGER NOT NULL,
  question_id INTEGER NOT NULL,
  FOREIGN KEY (tag_id) REFERENCES tags(tag_id),
  FOREIGN KEY (question_id) REFERENCES questions(question_id)
);
"""

TABLES = [
    "question_tags",
    "tags",
    "question_likes",
    "replies",
    "question_followers",
    "questions",
    "users",
]


def ensure_schema(conn: Connection):
    conn.executescript(DDL)
