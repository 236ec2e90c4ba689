from __future__ import annotations

import pytest

from talkboard import models
from talkboard.errors import NotFound
from talkboard.models import TalkLevel, TalkType
from talkboard.registry import EventRegistry, authored_by, selected
from talkboard.schemas import EventDraft, EventUpdate


@pytest.fixture
def registry(db):
    return EventRegistry(db)


@pytest.fixture
def alice(make_user):
    return make_user("alice", "pw1")


def test_create_stamps_author(registry, alice):
    event = registry.create(EventDraft(title="Talk A", type=TalkType.demo), "alice", alice.id)

    assert event.id is not None
    assert event.author_name == "alice"
    assert event.user_id == alice.id
    assert event.type is TalkType.demo
    assert event.level is TalkLevel.beginner
    assert event.is_selected is False
    assert event.owner.username == "alice"


def test_update_overwrites_by_id_and_keeps_authorship(registry, alice, make_user):
    bob = make_user("bob", "pw2")
    event = registry.create(EventDraft(title="Talk A"), "alice", alice.id)

    updated = registry.update(EventUpdate(id=event.id, title="Talk B", description="new",
                                          type=TalkType.demo, level=TalkLevel.advanced, is_selected=True))

    assert updated.title == "Talk B"
    assert updated.description == "new"
    assert updated.level is TalkLevel.advanced
    assert updated.is_selected is True
    assert updated.author_name == "alice"
    assert updated.user_id == alice.id != bob.id


def test_update_missing_id_creates_nothing(registry, db):
    with pytest.raises(NotFound):
        registry.update(EventUpdate(id=42, title="Ghost"))
    assert db.query(models.Event).count() == 0


def test_toggle_select_is_an_involution_and_local(registry, alice):
    a = registry.create(EventDraft(title="A"), "alice", alice.id)
    b = registry.create(EventDraft(title="B", is_selected=True), "alice", alice.id)

    assert registry.toggle_select(a.id).is_selected is True
    # Several events may be selected at once
    assert registry.get(b.id).is_selected is True
    assert registry.toggle_select(a.id).is_selected is False
    assert registry.get(b.id).is_selected is True


def test_toggle_select_missing_id(registry):
    with pytest.raises(NotFound):
        registry.toggle_select(7)


def test_delete_is_not_idempotent(registry, alice, db):
    event = registry.create(EventDraft(title="A"), "alice", alice.id)
    registry.delete(event.id)

    assert registry.list() == []
    with pytest.raises(NotFound):
        registry.delete(event.id)
    assert db.query(models.Event).count() == 0


def test_list_partitions_into_next_and_mine(registry, alice, make_user):
    bob = make_user("bob", "pw2")
    registry.create(EventDraft(title="mine, selected", is_selected=True), "alice", alice.id)
    registry.create(EventDraft(title="mine"), "alice", alice.id)
    registry.create(EventDraft(title="bob's, selected", is_selected=True), "bob", bob.id)

    events = registry.list()
    assert len(events) == 3
    assert {e.title for e in selected(events)} == {"mine, selected", "bob's, selected"}
    assert {e.title for e in authored_by(events, "alice")} == {"mine, selected", "mine"}
