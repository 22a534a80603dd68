from __future__ import annotations

from dataclasses import dataclass
from sqlite3 import Connection, Row
from typing import List, Optional

from ..repository import tag_repo


@dataclass
class PopularTag:
    tag: str
    title: str
    body: str
    author_id: int
    likes: int

    @classmethod
    def from_row(cls, row: Row) -> "PopularTag":
        return cls(
            tag=row["tag"],
            title=row["title"],
            body=row["body"],
            author_id=row["author_id"],
            likes=row["likes"],
        )


@dataclass
class Tag:
    tag_id: int
    tag: str

    @classmethod
    def from_row(cls, row: Row) -> "Tag":
        return cls(tag_id=row["tag_id"], tag=row["tag"])

    @classmethod
    def find_by_id(cls, conn: Connection, tag_id: int) -> Optional["Tag"]:
        row = tag_repo.get_by_id(conn, tag_id)
        return None if row is None else cls.from_row(row)

    @staticmethod
    def most_popular(conn: Connection) -> List[PopularTag]:
        return [PopularTag.from_row(r) for r in tag_repo.most_popular(conn)]
