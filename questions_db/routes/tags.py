from __future__ import annotations

from fastapi import APIRouter, HTTPException

from ..services.tag_svc import most_popular_tags

router = APIRouter()


@router.get("/api/tags/most-popular")
def api_tags_most_popular():
    try:
        return {"items": most_popular_tags()}
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
