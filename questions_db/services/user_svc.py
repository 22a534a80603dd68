from __future__ import annotations

from typing import Optional

from ..db import get_conn
from ..logs import LogContext
from ..models import User
from .utils import question_to_dict, reply_to_dict, to_items, user_to_dict


def get_user(user_id: int) -> Optional[dict]:
    with get_conn() as conn:
        u = User.find_by_id(conn, user_id)
    return None if u is None else user_to_dict(u)


def find_user(fname: str, lname: str) -> Optional[dict]:
    with get_conn() as conn:
        u = User.find_by_name(conn, fname, lname)
    return None if u is None else user_to_dict(u)


def _require(conn, user_id: int) -> User:
    u = User.find_by_id(conn, user_id)
    if u is None:
        raise LookupError("user_not_found")
    return u


def list_user_questions(user_id: int, relation: str) -> list[dict]:
    """relation: authored | followed | liked"""
    with get_conn() as conn:
        u = _require(conn, user_id)
        if relation == "authored":
            qs = u.authored_questions(conn)
        elif relation == "followed":
            qs = u.followed_questions(conn)
        elif relation == "liked":
            qs = u.liked_questions(conn)
        else:
            raise ValueError(f"unknown relation: {relation}")
        return to_items(qs, question_to_dict)


def list_user_replies(user_id: int) -> list[dict]:
    with get_conn() as conn:
        u = _require(conn, user_id)
        return to_items(u.authored_replies(conn), reply_to_dict)


def user_karma(user_id: int) -> dict:
    with get_conn() as conn:
        u = _require(conn, user_id)
        return {"user_id": u.user_id, "average_karma": u.average_karma(conn)}


def create_user(data: dict, log: LogContext) -> dict:
    with get_conn() as conn:
        u = User(fname=data["fname"], lname=data["lname"]).save(conn)
    out = user_to_dict(u)
    log.set_entity("user", u.user_id)
    log.set_after(out)
    return out


def update_user(user_id: int, data: dict, log: LogContext) -> dict:
    with get_conn() as conn:
        u = _require(conn, user_id)
        log.set_before(user_to_dict(u))
        u.fname = data["fname"]
        u.lname = data["lname"]
        u.save(conn)
    out = user_to_dict(u)
    log.set_entity("user", user_id)
    log.set_after(out)
    return out
