from __future__ import annotations

import logging
import sqlite3

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from ..logs import LogContext
from ..services.user_svc import (
    create_user, find_user, get_user, list_user_questions, list_user_replies,
    update_user, user_karma,
)

router = APIRouter()
logger = logging.getLogger(__name__)


class UserBody(BaseModel):
    fname: str
    lname: str


@router.get("/api/users/search")
def api_user_search(fname: str = Query(...), lname: str = Query(...)):
    u = find_user(fname, lname)
    if u is None:
        raise HTTPException(status_code=404, detail="user_not_found")
    return u


@router.get("/api/users/{user_id}")
def api_user_get(user_id: int):
    u = get_user(user_id)
    if u is None:
        raise HTTPException(status_code=404, detail="user_not_found")
    return u


@router.get("/api/users/{user_id}/questions")
def api_user_questions(user_id: int):
    try:
        return {"items": list_user_questions(user_id, "authored")}
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/api/users/{user_id}/followed")
def api_user_followed(user_id: int):
    try:
        return {"items": list_user_questions(user_id, "followed")}
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/api/users/{user_id}/liked")
def api_user_liked(user_id: int):
    try:
        return {"items": list_user_questions(user_id, "liked")}
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/api/users/{user_id}/replies")
def api_user_replies(user_id: int):
    try:
        return {"items": list_user_replies(user_id)}
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/api/users/{user_id}/karma")
def api_user_karma(user_id: int):
    try:
        return user_karma(user_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/api/users/create", status_code=201)
def api_user_create(body: UserBody):
    log = LogContext("CREATE_USER")
    log.set_payload(body.model_dump())
    try:
        res = create_user(body.model_dump(), log)
        log.write("OK")
        return {"message": "ok", "user": res}
    except sqlite3.IntegrityError as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"create user failed: {e}")
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/api/users/{user_id}/update")
def api_user_update(user_id: int, body: UserBody):
    log = LogContext("UPDATE_USER")
    log.set_payload(body.model_dump())
    try:
        res = update_user(user_id, body.model_dump(), log)
        log.write("OK")
        return {"message": "ok", "user": res}
    except LookupError as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=404, detail=str(e))
    except sqlite3.IntegrityError as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"update user {user_id} failed: {e}")
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail=str(e))
