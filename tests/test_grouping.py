"""Tests for grouping keys, columns and resolving keys back to attributes."""

import pytest

from ticketboard.grouping import (
    NO_LABELS,
    UNASSIGNED,
    GroupBy,
    UnresolvedReferenceError,
    apply_group_key,
    columns_of,
    group_key_of,
    parse_group_by,
)
from ticketboard.models import Requester

from .conftest import ALICE, BOB, BUG, DOCS, STATUSES, UI, _make_ticket


def test_group_key_status():
    assert group_key_of(GroupBy.STATUS, _make_ticket("1", "done")) == "done"


def test_group_key_assignee():
    assert group_key_of(GroupBy.ASSIGNEE, _make_ticket("1", assignee=ALICE)) == ALICE.email
    assert group_key_of(GroupBy.ASSIGNEE, _make_ticket("1")) == UNASSIGNED


def test_group_key_assignee_without_email_is_unassigned():
    ticket = _make_ticket("1", assignee=Requester("Nobody", ""))
    assert group_key_of(GroupBy.ASSIGNEE, ticket) == UNASSIGNED


def test_group_key_priority():
    assert group_key_of(GroupBy.PRIORITY, _make_ticket("1", priority="severe")) == "severe"


def test_group_key_label_uses_first_label_only():
    assert group_key_of(GroupBy.LABEL, _make_ticket("1", labels=[UI, BUG])) == "ui"
    assert group_key_of(GroupBy.LABEL, _make_ticket("1")) == NO_LABELS


def test_parse_group_by():
    assert parse_group_by("label") is GroupBy.LABEL
    assert parse_group_by(GroupBy.PRIORITY) is GroupBy.PRIORITY


def test_parse_group_by_unknown_falls_back_to_status():
    assert parse_group_by("swimlane") is GroupBy.STATUS
    assert parse_group_by(None) is GroupBy.STATUS


def test_columns_status_pass_through():
    columns = columns_of(GroupBy.STATUS, STATUSES, [], [])
    assert [c.id for c in columns] == ["new", "in-progress", "waiting-vendor", "done"]
    assert columns[0].color == "#2563eb"
    assert [c.order for c in columns] == [0, 1, 2, 3]


def test_columns_assignee_roster_then_unassigned():
    columns = columns_of(GroupBy.ASSIGNEE, STATUSES, [BOB, ALICE], [])
    assert [(c.id, c.order) for c in columns] == [(BOB.email, 0), (ALICE.email, 1), (UNASSIGNED, 2)]
    assert columns[-1].name == "Unassigned"


def test_columns_priority_fixed_order():
    columns = columns_of(GroupBy.PRIORITY, [], [], [])
    assert [(c.id, c.order) for c in columns] == [
        ("severe", 0),
        ("high", 1),
        ("medium", 2),
        ("low", 3),
        ("none", 4),
    ]


def test_columns_label_roster_then_no_labels():
    columns = columns_of(GroupBy.LABEL, [], [], [DOCS, BUG])
    assert [(c.id, c.order) for c in columns] == [("docs", 0), ("bug", 1), (NO_LABELS, 2)]
    assert columns[0].color == DOCS.color


def test_columns_empty_rosters_still_have_sentinels():
    assert [c.id for c in columns_of(GroupBy.ASSIGNEE, [], [], [])] == [UNASSIGNED]
    assert [c.id for c in columns_of(GroupBy.LABEL, [], [], [])] == [NO_LABELS]


def test_apply_status_without_references_takes_key():
    ticket = apply_group_key(GroupBy.STATUS, _make_ticket("1"), "anything")
    assert ticket.status == "anything"


def test_apply_keeps_order_and_other_fields(references):
    original = _make_ticket("1", order=4, assignee=ALICE, labels=[BUG])
    ticket = apply_group_key(GroupBy.PRIORITY, original, "high", references)
    assert ticket.order == 4
    assert ticket.assignee == ALICE
    assert ticket.labels == (BUG,)


def test_apply_assignee_resolves_roster_record(references):
    stale = Requester("Old Name", BOB.email)
    ticket = apply_group_key(GroupBy.ASSIGNEE, _make_ticket("1", assignee=stale), BOB.email, references)
    assert ticket.assignee is BOB


def test_apply_unresolved_returns_ticket_unchanged(references):
    original = _make_ticket("1", labels=[UI])
    assert apply_group_key(GroupBy.LABEL, original, "missing", references) is original


def test_apply_unresolved_strict(references):
    with pytest.raises(UnresolvedReferenceError) as exc:
        apply_group_key(GroupBy.LABEL, _make_ticket("1"), "missing", references, strict=True)
    assert exc.value.mode is GroupBy.LABEL
    assert exc.value.key == "missing"
