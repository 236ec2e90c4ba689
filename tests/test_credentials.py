from __future__ import annotations

import pytest

from talkboard import models
from talkboard.credentials import CredentialStore
from talkboard.errors import DuplicateUsername, NotFound


def test_add_and_lookup(db):
    store = CredentialStore(db)
    user = store.add("alice", "hash-a")

    assert user.id is not None
    assert store.find_by_username("alice").id == user.id
    assert store.get(user.id).username == "alice"
    assert store.exists("alice") is True
    assert store.exists("bob") is False
    assert store.find_by_username("bob") is None


def test_unique_column_backs_up_the_lookup(db):
    store = CredentialStore(db)
    store.add("alice", "hash-a")

    with pytest.raises(DuplicateUsername):
        store.add("alice", "hash-b")

    rows = db.query(models.User).filter(models.User.username == "alice").all()
    assert len(rows) == 1
    assert rows[0].hashed_password == "hash-a"


def test_update_keeps_hash_when_not_given(db):
    store = CredentialStore(db)
    user = store.add("alice", "hash-a")

    updated = store.update(user.id, "alicia")
    assert updated.username == "alicia"
    assert updated.hashed_password == "hash-a"

    updated = store.update(user.id, "alicia", "hash-b")
    assert updated.hashed_password == "hash-b"


def test_update_unknown_user(db):
    with pytest.raises(NotFound):
        CredentialStore(db).update(999, "ghost")
