from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..logs import LogContext
from ..services.reply_svc import (
    create_reply, get_parent_reply, get_reply, list_child_replies, update_reply,
)

router = APIRouter()
logger = logging.getLogger(__name__)


class ReplyCreate(BaseModel):
    reply: str
    author_id: int
    question_id: int
    parent_id: Optional[int] = None


class ReplyUpdate(BaseModel):
    reply: str


@router.get("/api/replies/{reply_id}")
def api_reply_get(reply_id: int):
    r = get_reply(reply_id)
    if r is None:
        raise HTTPException(status_code=404, detail="reply_not_found")
    return r


@router.get("/api/replies/{reply_id}/parent")
def api_reply_parent(reply_id: int):
    try:
        parent = get_parent_reply(reply_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    # top-level replies have no parent
    return {"parent": parent}


@router.get("/api/replies/{reply_id}/children")
def api_reply_children(reply_id: int):
    try:
        return {"items": list_child_replies(reply_id)}
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/api/replies/create", status_code=201)
def api_reply_create(body: ReplyCreate):
    log = LogContext("CREATE_REPLY")
    log.set_payload(body.model_dump())
    try:
        res = create_reply(body.model_dump(), log)
        log.write("OK")
        return {"message": "ok", "reply": res}
    except sqlite3.IntegrityError as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"create reply failed: {e}")
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/api/replies/{reply_id}/update")
def api_reply_update(reply_id: int, body: ReplyUpdate):
    log = LogContext("UPDATE_REPLY")
    log.set_payload(body.model_dump())
    try:
        res = update_reply(reply_id, body.model_dump(), log)
        log.write("OK")
        return {"message": "ok", "reply": res}
    except LookupError as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=404, detail=str(e))
    except sqlite3.IntegrityError as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"update reply {reply_id} failed: {e}")
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail=str(e))
