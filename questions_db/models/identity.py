"""
Row identity carried by every saveable entity.

An entity is either Unsaved (never written, no primary key yet) or
Persisted(id). save() inserts for the former and updates for the latter.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


class Unsaved:
    _instance: Optional["Unsaved"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSAVED"


UNSAVED = Unsaved()


@dataclass(frozen=True)
class Persisted:
    id: int


Identity = Union[Unsaved, Persisted]


def identity_of(pk: Optional[int]) -> Identity:
    return UNSAVED if pk is None else Persisted(int(pk))


def id_or_none(identity: Identity) -> Optional[int]:
    return identity.id if isinstance(identity, Persisted) else None
