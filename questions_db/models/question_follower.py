from __future__ import annotations

from dataclasses import dataclass
from sqlite3 import Connection, Row
from typing import List, Optional

from ..repository import follower_repo


@dataclass
class QuestionFollower:
    id: Optional[int]
    question_id: int
    user_id: int

    @classmethod
    def from_row(cls, row: Row) -> "QuestionFollower":
        return cls(id=row["id"], question_id=row["question_id"], user_id=row["user_id"])

    @staticmethod
    def followers_for_question_id(conn: Connection, question_id: int) -> Optional[List["User"]]:
        from .user import User
        return [User.from_row(r) for r in follower_repo.followers_for_question(conn, question_id)] or None

    @staticmethod
    def followed_questions_for_user_id(conn: Connection, user_id: int) -> Optional[List["Question"]]:
        from .question import Question
        return [Question.from_row(r) for r in follower_repo.questions_followed_by(conn, user_id)] or None

    @staticmethod
    def most_followed_questions(conn: Connection, n: int) -> Optional[List["Question"]]:
        """Top n questions by follower count; order among ties is unspecified."""
        from .question import Question
        return [Question.from_row(r) for r in follower_repo.most_followed(conn, n)] or None
