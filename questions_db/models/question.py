from __future__ import annotations

import logging
from dataclasses import dataclass, field
from sqlite3 import Connection, Row
from typing import List, Optional

from ..repository import question_repo
from .identity import UNSAVED, Identity, Persisted, id_or_none, identity_of

logger = logging.getLogger(__name__)


@dataclass
class Question:
    title: str
    body: str
    author_id: int
    identity: Identity = field(default=UNSAVED)

    @property
    def question_id(self) -> Optional[int]:
        return id_or_none(self.identity)

    @classmethod
    def from_row(cls, row: Row) -> "Question":
        return cls(
            title=row["title"],
            body=row["body"],
            author_id=row["author_id"],
            identity=identity_of(row["question_id"]),
        )

    @classmethod
    def find_by_id(cls, conn: Connection, question_id: int) -> Optional["Question"]:
        row = question_repo.get_by_id(conn, question_id)
        return None if row is None else cls.from_row(row)

    @classmethod
    def find_by_author_id(cls, conn: Connection, author_id: int) -> Optional[List["Question"]]:
        rows = question_repo.list_by_author(conn, author_id)
        return [cls.from_row(r) for r in rows] or None

    @classmethod
    def most_followed(cls, conn: Connection, n: int) -> Optional[List["Question"]]:
        from .question_follower import QuestionFollower
        return QuestionFollower.most_followed_questions(conn, n)

    @classmethod
    def most_liked(cls, conn: Connection, n: int) -> Optional[List["Question"]]:
        from .question_like import QuestionLike
        return QuestionLike.most_liked_questions(conn, n)

    def author(self, conn: Connection) -> Optional["User"]:
        from .user import User
        row = question_repo.get_author(conn, self.author_id)
        return None if row is None else User.from_row(row)

    def replies(self, conn: Connection) -> Optional[List["Reply"]]:
        from .reply import Reply
        return Reply.find_by_question_id(conn, self.question_id)

    def followers(self, conn: Connection) -> Optional[List["User"]]:
        from .question_follower import QuestionFollower
        return QuestionFollower.followers_for_question_id(conn, self.question_id)

    def likers(self, conn: Connection) -> Optional[List["User"]]:
        from .question_like import QuestionLike
        return QuestionLike.likers_for_question_id(conn, self.question_id)

    def num_likes(self, conn: Connection) -> Optional[int]:
        from .question_like import QuestionLike
        return QuestionLike.num_likes_for_question_id(conn, self.question_id)

    def save(self, conn: Connection) -> "Question":
        # author_id is only written on insert
        if isinstance(self.identity, Persisted):
            question_repo.update(conn, self.identity.id, self.title, self.body)
            logger.debug(f"updated question {self.identity.id}")
        else:
            new_id = question_repo.insert(conn, self.title, self.body, self.author_id)
            self.identity = Persisted(new_id)
            logger.debug(f"inserted question {new_id}")
        return self
