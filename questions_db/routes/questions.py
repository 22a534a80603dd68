from __future__ import annotations

import logging
import sqlite3

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from ..logs import LogContext
from ..services.question_svc import (
    create_question, get_question, get_question_author, list_question_replies,
    list_question_users, question_likes, top_questions, update_question,
)

router = APIRouter()
logger = logging.getLogger(__name__)


class QuestionCreate(BaseModel):
    title: str
    body: str
    author_id: int


class QuestionUpdate(BaseModel):
    title: str
    body: str


@router.get("/api/questions/most-followed")
def api_questions_most_followed(n: int = Query(5, ge=1)):
    return {"items": top_questions(n, "followers")}


@router.get("/api/questions/most-liked")
def api_questions_most_liked(n: int = Query(5, ge=1)):
    return {"items": top_questions(n, "likes")}


@router.get("/api/questions/{question_id}")
def api_question_get(question_id: int):
    q = get_question(question_id)
    if q is None:
        raise HTTPException(status_code=404, detail="question_not_found")
    return q


@router.get("/api/questions/{question_id}/author")
def api_question_author(question_id: int):
    try:
        author = get_question_author(question_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    if author is None:
        raise HTTPException(status_code=404, detail="user_not_found")
    return author


@router.get("/api/questions/{question_id}/replies")
def api_question_replies(question_id: int):
    try:
        return {"items": list_question_replies(question_id)}
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/api/questions/{question_id}/followers")
def api_question_followers(question_id: int):
    try:
        return {"items": list_question_users(question_id, "followers")}
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/api/questions/{question_id}/likers")
def api_question_likers(question_id: int):
    try:
        return {"items": list_question_users(question_id, "likers")}
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/api/questions/{question_id}/likes")
def api_question_likes(question_id: int):
    try:
        return question_likes(question_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/api/questions/create", status_code=201)
def api_question_create(body: QuestionCreate):
    log = LogContext("CREATE_QUESTION")
    log.set_payload(body.model_dump())
    try:
        res = create_question(body.model_dump(), log)
        log.write("OK")
        return {"message": "ok", "question": res}
    except sqlite3.IntegrityError as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"create question failed: {e}")
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/api/questions/{question_id}/update")
def api_question_update(question_id: int, body: QuestionUpdate):
    log = LogContext("UPDATE_QUESTION")
    log.set_payload(body.model_dump())
    try:
        res = update_question(question_id, body.model_dump(), log)
        log.write("OK")
        return {"message": "ok", "question": res}
    except LookupError as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=404, detail=str(e))
    except sqlite3.IntegrityError as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"update question {question_id} failed: {e}")
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail=str(e))
