"""
Question mapper tests, including the follower/like ranking queries.
"""
from __future__ import annotations

import sqlite3

import pytest

from questions_db.models import Question, QuestionFollower, QuestionLike, Reply, User


def _like(conn, question_id, user_id):
    conn.execute("INSERT INTO question_likes(question_id, user_id) VALUES(?, ?)", (question_id, user_id))


def _follow(conn, question_id, user_id):
    conn.execute("INSERT INTO question_followers(question_id, user_id) VALUES(?, ?)", (question_id, user_id))


@pytest.fixture()
def users(conn):
    return [User(fname=f"U{i}", lname="Test").save(conn) for i in range(4)]


def test_save_insert_then_update(conn, users):
    q = Question(title="Old", body="old body", author_id=users[0].user_id)
    assert q.question_id is None
    q.save(conn)
    qid = q.question_id
    assert qid is not None

    q.title, q.body = "New", "new body"
    q.author_id = users[1].user_id  # not written on update
    q.save(conn)

    stored = Question.find_by_id(conn, qid)
    assert stored.question_id == qid
    assert (stored.title, stored.body) == ("New", "new body")
    assert stored.author_id == users[0].user_id


def test_insert_with_unknown_author_is_rejected(conn):
    with pytest.raises(sqlite3.IntegrityError):
        Question(title="t", body="b", author_id=12345).save(conn)


def test_find_by_author_id(conn, users):
    assert Question.find_by_author_id(conn, users[0].user_id) is None
    a = Question(title="A", body="a", author_id=users[0].user_id).save(conn)
    b = Question(title="B", body="b", author_id=users[0].user_id).save(conn)
    found = Question.find_by_author_id(conn, users[0].user_id)
    assert [q.question_id for q in found] == [a.question_id, b.question_id]


def test_find_by_id_missing(conn):
    assert Question.find_by_id(conn, 42) is None


def test_author(conn, users):
    q = Question(title="A", body="a", author_id=users[2].user_id).save(conn)
    author = q.author(conn)
    assert author.user_id == users[2].user_id
    assert author.fname == "U2"


def test_author_requires_an_existing_question(conn, users):
    draft = Question(title="draft", body="d", author_id=users[3].user_id)
    assert draft.author(conn) is None


def test_replies(conn, users):
    q = Question(title="A", body="a", author_id=users[0].user_id).save(conn)
    assert q.replies(conn) is None
    Reply(reply="first", author_id=users[1].user_id, question_id=q.question_id).save(conn)
    Reply(reply="second", author_id=users[2].user_id, question_id=q.question_id).save(conn)
    assert [r.reply for r in q.replies(conn)] == ["first", "second"]


def test_followers_and_likers(conn, users):
    q = Question(title="A", body="a", author_id=users[0].user_id).save(conn)
    assert q.followers(conn) is None
    assert q.likers(conn) is None

    _follow(conn, q.question_id, users[1].user_id)
    _like(conn, q.question_id, users[2].user_id)
    _like(conn, q.question_id, users[3].user_id)

    assert [u.user_id for u in q.followers(conn)] == [users[1].user_id]
    assert sorted(u.user_id for u in q.likers(conn)) == [users[2].user_id, users[3].user_id]


def test_num_likes_is_none_without_likes(conn, users):
    q = Question(title="A", body="a", author_id=users[0].user_id).save(conn)
    assert q.num_likes(conn) is None
    assert QuestionLike.num_likes_for_question_id(conn, q.question_id) is None
    _like(conn, q.question_id, users[1].user_id)
    _like(conn, q.question_id, users[2].user_id)
    assert q.num_likes(conn) == 2


def test_most_liked_orders_by_count(conn, users):
    three = Question(title="three", body="b", author_id=users[0].user_id).save(conn)
    one = Question(title="one", body="b", author_id=users[0].user_id).save(conn)
    two = Question(title="two", body="b", author_id=users[0].user_id).save(conn)
    for u in users[1:]:
        _like(conn, three.question_id, u.user_id)
    _like(conn, one.question_id, users[1].user_id)
    _like(conn, two.question_id, users[1].user_id)
    _like(conn, two.question_id, users[2].user_id)

    top = Question.most_liked(conn, 2)
    assert len(top) == 2
    assert [q.title for q in top] == ["three", "two"]
    assert top[0].question_id == three.question_id


def test_most_liked_with_no_likes(conn):
    assert Question.most_liked(conn, 3) is None


def test_most_followed(conn, users):
    a = Question(title="a", body="b", author_id=users[0].user_id).save(conn)
    b = Question(title="b", body="b", author_id=users[0].user_id).save(conn)
    _follow(conn, a.question_id, users[1].user_id)
    for u in users[1:]:
        _follow(conn, b.question_id, u.user_id)

    top = Question.most_followed(conn, 1)
    assert [q.question_id for q in top] == [b.question_id]
    assert QuestionFollower.most_followed_questions(conn, 5)[1].question_id == a.question_id


def test_join_rows_from_row(conn, users):
    q = Question(title="a", body="b", author_id=users[0].user_id).save(conn)
    _follow(conn, q.question_id, users[1].user_id)
    _like(conn, q.question_id, users[2].user_id)

    f = QuestionFollower.from_row(conn.execute("SELECT * FROM question_followers").fetchone())
    assert (f.question_id, f.user_id) == (q.question_id, users[1].user_id)
    assert f.id is not None
    like = QuestionLike.from_row(conn.execute("SELECT * FROM question_likes").fetchone())
    assert (like.question_id, like.user_id) == (q.question_id, users[2].user_id)
