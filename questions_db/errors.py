"""Exceptions raised by the data-access layer.

"Not found" is never an error: finders return None instead. SQL failures
(constraint violations, malformed queries) propagate as sqlite3.Error.
"""
from __future__ import annotations


class QuestionsDBError(Exception):
    pass


class DatabaseConnectionError(QuestionsDBError):
    def __init__(self, path: str, cause: Exception):
        super().__init__(f"cannot open database {path}: {cause}")
        self.path = path
        self.cause = cause
