"""Tests for the versioned ticket store."""

from ticketboard.model.store import TicketStore

from ..conftest import ALICE, BOB, _make_ticket


def test_read_returns_copy(tickets):
    store = TicketStore(tickets)
    snapshot = store.read()
    snapshot.pop()
    assert len(store) == 5


def test_replace_bumps_version(tickets):
    store = TicketStore(tickets)
    assert store.version == 0
    assert store.replace(tickets[:2]) is True
    assert store.version == 1
    assert [t.id for t in store] == ["1", "2"]


def test_replace_with_equal_collection_is_noop(tickets):
    store = TicketStore(tickets)
    assert store.replace(list(tickets)) is False
    assert store.version == 0


def test_watch_receives_old_and_new(tickets):
    store = TicketStore(tickets)
    calls = []
    store.watch(lambda s, old, new: calls.append((s, len(old), len(new))))

    store.replace(tickets[:3])
    assert calls == [(store, 5, 3)]


def test_watch_not_called_for_noop(tickets):
    store = TicketStore(tickets)
    calls = []
    store.watch(lambda *a: calls.append(a))
    store.replace(tickets)
    assert calls == []


def test_unwatch(tickets):
    store = TicketStore(tickets)
    calls = []
    unwatch = store.watch(lambda *a: calls.append(a))
    unwatch()
    store.replace([])
    assert calls == []
    unwatch()  # second call is harmless


def test_get(tickets):
    store = TicketStore(tickets)
    assert store.get("4").status == "in-progress"
    assert store.get("99") is None


def test_requesters_follow_replacements():
    store = TicketStore([_make_ticket("1", requester=ALICE)])
    assert store.requesters() == [ALICE]
    store.replace([_make_ticket("1", requester=ALICE), _make_ticket("2", requester=BOB)])
    assert store.requesters() == [ALICE, BOB]


def test_requesters_returns_fresh_list():
    store = TicketStore([_make_ticket("1", requester=ALICE)])
    store.requesters().clear()
    assert store.requesters() == [ALICE]


def test_repr():
    assert repr(TicketStore()) == "<TicketStore v0 [0 tickets]>"
