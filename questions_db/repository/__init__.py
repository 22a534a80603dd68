"""Repository layer: DB access helpers (SQLite).

Keep functions thin and focused: each takes a connection, runs one
parameterized statement and hands back sqlite3.Row objects (or a row id).
Decoding rows into entities is the job of questions_db.models.
"""
from __future__ import annotations
