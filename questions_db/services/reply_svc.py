from __future__ import annotations

from typing import Optional

from ..db import get_conn
from ..logs import LogContext
from ..models import Reply
from .utils import reply_to_dict, to_items


def _require(conn, reply_id: int) -> Reply:
    r = Reply.find_by_id(conn, reply_id)
    if r is None:
        raise LookupError("reply_not_found")
    return r


def get_reply(reply_id: int) -> Optional[dict]:
    with get_conn() as conn:
        r = Reply.find_by_id(conn, reply_id)
    return None if r is None else reply_to_dict(r)


def get_parent_reply(reply_id: int) -> Optional[dict]:
    with get_conn() as conn:
        parent = _require(conn, reply_id).parent_reply(conn)
    return None if parent is None else reply_to_dict(parent)


def list_child_replies(reply_id: int) -> list[dict]:
    with get_conn() as conn:
        return to_items(_require(conn, reply_id).child_replies(conn), reply_to_dict)


def create_reply(data: dict, log: LogContext) -> dict:
    with get_conn() as conn:
        r = Reply(
            reply=data["reply"],
            author_id=data["author_id"],
            question_id=data["question_id"],
            parent_id=data.get("parent_id"),
        ).save(conn)
    out = reply_to_dict(r)
    log.set_entity("reply", r.id)
    log.set_after(out)
    return out


def update_reply(reply_id: int, data: dict, log: LogContext) -> dict:
    with get_conn() as conn:
        r = _require(conn, reply_id)
        log.set_before(reply_to_dict(r))
        r.reply = data["reply"]
        r.save(conn)
    out = reply_to_dict(r)
    log.set_entity("reply", reply_id)
    log.set_after(out)
    return out
