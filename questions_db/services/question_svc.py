from __future__ import annotations

from typing import Optional

from ..db import get_conn
from ..logs import LogContext
from ..models import Question
from .utils import question_to_dict, reply_to_dict, to_items, user_to_dict


def _require(conn, question_id: int) -> Question:
    q = Question.find_by_id(conn, question_id)
    if q is None:
        raise LookupError("question_not_found")
    return q


def get_question(question_id: int) -> Optional[dict]:
    with get_conn() as conn:
        q = Question.find_by_id(conn, question_id)
    return None if q is None else question_to_dict(q)


def get_question_author(question_id: int) -> Optional[dict]:
    with get_conn() as conn:
        author = _require(conn, question_id).author(conn)
    return None if author is None else user_to_dict(author)


def list_question_replies(question_id: int) -> list[dict]:
    with get_conn() as conn:
        return to_items(_require(conn, question_id).replies(conn), reply_to_dict)


def list_question_users(question_id: int, relation: str) -> list[dict]:
    """relation: followers | likers"""
    with get_conn() as conn:
        q = _require(conn, question_id)
        if relation == "followers":
            users = q.followers(conn)
        elif relation == "likers":
            users = q.likers(conn)
        else:
            raise ValueError(f"unknown relation: {relation}")
        return to_items(users, user_to_dict)


def question_likes(question_id: int) -> dict:
    with get_conn() as conn:
        q = _require(conn, question_id)
        # None means no like rows at all; kept distinct from 0
        return {"question_id": q.question_id, "num_likes": q.num_likes(conn)}


def top_questions(n: int, by: str) -> list[dict]:
    """by: followers | likes"""
    with get_conn() as conn:
        if by == "followers":
            qs = Question.most_followed(conn, n)
        elif by == "likes":
            qs = Question.most_liked(conn, n)
        else:
            raise ValueError(f"unknown ranking: {by}")
        return to_items(qs, question_to_dict)


def create_question(data: dict, log: LogContext) -> dict:
    with get_conn() as conn:
        q = Question(title=data["title"], body=data["body"], author_id=data["author_id"]).save(conn)
    out = question_to_dict(q)
    log.set_entity("question", q.question_id)
    log.set_after(out)
    return out


def update_question(question_id: int, data: dict, log: LogContext) -> dict:
    with get_conn() as conn:
        q = _require(conn, question_id)
        log.set_before(question_to_dict(q))
        q.title = data["title"]
        q.body = data["body"]
        q.save(conn)
    out = question_to_dict(q)
    log.set_entity("question", question_id)
    log.set_after(out)
    return out
