from __future__ import annotations

from dataclasses import dataclass
from sqlite3 import Connection, Row
from typing import List, Optional

from ..repository import like_repo


@dataclass
class QuestionLike:
    question_id: int
    user_id: int

    @classmethod
    def from_row(cls, row: Row) -> "QuestionLike":
        return cls(question_id=row["question_id"], user_id=row["user_id"])

    @staticmethod
    def likers_for_question_id(conn: Connection, question_id: int) -> Optional[List["User"]]:
        from .user import User
        return [User.from_row(r) for r in like_repo.likers_for_question(conn, question_id)] or None

    @staticmethod
    def num_likes_for_question_id(conn: Connection, question_id: int) -> Optional[int]:
        """Like count, or None (not 0) when the question has no likes."""
        return like_repo.count_for_question(conn, question_id)

    @staticmethod
    def liked_questions_for_user_id(conn: Connection, user_id: int) -> Optional[List["Question"]]:
        from .question import Question
        return [Question.from_row(r) for r in like_repo.questions_liked_by(conn, user_id)] or None

    @staticmethod
    def most_liked_questions(conn: Connection, n: int) -> Optional[List["Question"]]:
        """Top n questions by like count; order among ties is unspecified."""
        from .question import Question
        return [Question.from_row(r) for r in like_repo.most_liked(conn, n)] or None
