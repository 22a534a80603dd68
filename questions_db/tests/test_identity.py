from questions_db.models.identity import (
    UNSAVED, Persisted, Unsaved, id_or_none, identity_of,
)


def test_unsaved_is_singleton():
    assert Unsaved() is UNSAVED
    assert repr(UNSAVED) == "UNSAVED"


def test_identity_of():
    assert identity_of(None) is UNSAVED
    assert identity_of(7) == Persisted(7)


def test_id_or_none():
    assert id_or_none(UNSAVED) is None
    assert id_or_none(Persisted(3)) == 3
