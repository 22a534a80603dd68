from __future__ import annotations

import logging
from dataclasses import dataclass, field
from sqlite3 import Connection, Row
from typing import List, Optional

from ..repository import user_repo
from .identity import UNSAVED, Identity, Persisted, id_or_none, identity_of

logger = logging.getLogger(__name__)


@dataclass
class User:
    fname: str
    lname: str
    identity: Identity = field(default=UNSAVED)

    @property
    def user_id(self) -> Optional[int]:
        return id_or_none(self.identity)

    @classmethod
    def from_row(cls, row: Row) -> "User":
        return cls(
            fname=row["fname"],
            lname=row["lname"],
            identity=identity_of(row["user_id"]),
        )

    @classmethod
    def find_by_name(cls, conn: Connection, fname: str, lname: str) -> Optional["User"]:
        row = user_repo.get_by_name(conn, fname, lname)
        return None if row is None else cls.from_row(row)

    @classmethod
    def find_by_id(cls, conn: Connection, user_id: int) -> Optional["User"]:
        row = user_repo.get_by_id(conn, user_id)
        return None if row is None else cls.from_row(row)

    def authored_questions(self, conn: Connection) -> Optional[List["Question"]]:
        from .question import Question
        return Question.find_by_author_id(conn, self.user_id)

    def authored_replies(self, conn: Connection) -> Optional[List["Reply"]]:
        from .reply import Reply
        return Reply.find_by_user_id(conn, self.user_id)

    def followed_questions(self, conn: Connection) -> Optional[List["Question"]]:
        from .question_follower import QuestionFollower
        return QuestionFollower.followed_questions_for_user_id(conn, self.user_id)

    def liked_questions(self, conn: Connection) -> Optional[List["Question"]]:
        from .question_like import QuestionLike
        return QuestionLike.liked_questions_for_user_id(conn, self.user_id)

    def average_karma(self, conn: Connection):
        """
        Average likes per question, always computed for author id 1.

        Known defect kept as is: the result does not depend on self. See
        user_repo.average_karma for how unliked questions are counted.
        """
        return user_repo.average_karma(conn)

    def save(self, conn: Connection) -> "User":
        if isinstance(self.identity, Persisted):
            user_repo.update(conn, self.identity.id, self.fname, self.lname)
            logger.debug(f"updated user {self.identity.id}")
        else:
            new_id = user_repo.insert(conn, self.fname, self.lname)
            self.identity = Persisted(new_id)
            logger.debug(f"inserted user {new_id}")
        return self
