from __future__ import annotations

import logging
from dataclasses import dataclass, field
from sqlite3 import Connection, Row
from typing import List, Optional

from ..repository import reply_repo
from .identity import UNSAVED, Identity, Persisted, id_or_none, identity_of

logger = logging.getLogger(__name__)


@dataclass
class Reply:
    """
    One reply to a question, optionally nested under a parent reply.

    Threads are walked one level at a time with parent_reply() and
    child_replies(); nothing materializes a whole tree.
    """
    reply: str
    author_id: int
    question_id: int
    parent_id: Optional[int] = None
    identity: Identity = field(default=UNSAVED)

    @property
    def id(self) -> Optional[int]:
        return id_or_none(self.identity)

    @classmethod
    def from_row(cls, row: Row) -> "Reply":
        return cls(
            reply=row["reply"],
            author_id=row["author_id"],
            question_id=row["question_id"],
            parent_id=row["parent_id"],
            identity=identity_of(row["id"]),
        )

    @classmethod
    def find_by_id(cls, conn: Connection, reply_id: int) -> Optional["Reply"]:
        row = reply_repo.get_by_id(conn, reply_id)
        return None if row is None else cls.from_row(row)

    @classmethod
    def find_by_user_id(cls, conn: Connection, user_id: int) -> Optional[List["Reply"]]:
        rows = reply_repo.list_by_author(conn, user_id)
        return [cls.from_row(r) for r in rows] or None

    @classmethod
    def find_by_question_id(cls, conn: Connection, question_id: int) -> Optional[List["Reply"]]:
        rows = reply_repo.list_by_question(conn, question_id)
        return [cls.from_row(r) for r in rows] or None

    def author(self, conn: Connection) -> Optional["User"]:
        from .user import User
        row = reply_repo.get_author(conn, self.author_id)
        return None if row is None else User.from_row(row)

    def question(self, conn: Connection) -> Optional["Question"]:
        from .question import Question
        return Question.find_by_id(conn, self.question_id)

    def parent_reply(self, conn: Connection) -> Optional["Reply"]:
        if self.parent_id is None:
            return None
        return Reply.find_by_id(conn, self.parent_id)

    def child_replies(self, conn: Connection) -> Optional[List["Reply"]]:
        # a leaf gives None, not []
        if self.id is None:
            return None
        rows = reply_repo.list_children(conn, self.id)
        return [Reply.from_row(r) for r in rows] or None

    def save(self, conn: Connection) -> "Reply":
        if isinstance(self.identity, Persisted):
            reply_repo.update(conn, self.identity.id, self.reply)
            logger.debug(f"updated reply {self.identity.id}")
        else:
            new_id = reply_repo.insert(
                conn, self.reply, self.author_id, self.question_id, self.parent_id
            )
            self.identity = Persisted(new_id)
            logger.debug(f"inserted reply {new_id}")
        return self
