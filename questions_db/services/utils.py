from __future__ import annotations

# questions_db/services/utils.py
from typing import Iterable, Optional

from ..models import PopularTag, Question, Reply, User


def user_to_dict(u: User) -> dict:
    return {"user_id": u.user_id, "fname": u.fname, "lname": u.lname}


def question_to_dict(q: Question) -> dict:
    return {
        "question_id": q.question_id,
        "title": q.title,
        "body": q.body,
        "author_id": q.author_id,
    }


def reply_to_dict(r: Reply) -> dict:
    return {
        "id": r.id,
        "reply": r.reply,
        "author_id": r.author_id,
        "question_id": r.question_id,
        "parent_id": r.parent_id,
    }


def popular_tag_to_dict(p: PopularTag) -> dict:
    return {
        "tag": p.tag,
        "title": p.title,
        "body": p.body,
        "author_id": p.author_id,
        "likes": p.likes,
    }


def to_items(entities: Optional[Iterable], fn) -> list[dict]:
    # finders answer None for "no rows"; the HTTP surface always lists
    return [fn(e) for e in (entities or [])]
