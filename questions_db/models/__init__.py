"""
Entity mappers for the questions database.

Each entity is a plain dataclass decoded field by field from a sqlite3.Row.
Finders and relationship methods take the connection explicitly; nothing
is cached, every call runs a fresh query.
"""
from __future__ import annotations

from .identity import UNSAVED, Identity, Persisted, Unsaved
from .user import User
from .question import Question
from .reply import Reply
from .question_follower import QuestionFollower
from .question_like import QuestionLike
from .tag import PopularTag, Tag

__all__ = [
    "UNSAVED",
    "Identity",
    "Persisted",
    "Unsaved",
    "User",
    "Question",
    "Reply",
    "QuestionFollower",
    "QuestionLike",
    "PopularTag",
    "Tag",
]
