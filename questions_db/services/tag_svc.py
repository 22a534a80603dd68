from __future__ import annotations

from ..db import get_conn
from ..models import Tag
from .utils import popular_tag_to_dict


def most_popular_tags() -> list[dict]:
    with get_conn() as conn:
        return [popular_tag_to_dict(p) for p in Tag.most_popular(conn)]
