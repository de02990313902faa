"""Shared test helpers."""

from datetime import datetime, timezone

import pytest

from ticketboard.models import Label, ReferenceData, Requester, Status, Ticket

ALICE = Requester("Alice Ames", "alice@example.com")
BOB = Requester("Bob Burns", "bob@example.com")
CAROL = Requester("Carol Cho", "carol@example.com")

BUG = Label("bug", "Bug", "#cc0000")
UI = Label("ui", "UI", "#2266cc")
DOCS = Label("docs", "Docs", "#668800")

STATUSES = (
    Status("new", "New", "#2563eb", 0),
    Status("in-progress", "In Progress", "#f97316", 1),
    Status("waiting-vendor", "Waiting for Vendor", "#d97706", 2),
    Status("done", "Done", "#059669", 3),
)

CREATED = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _make_ticket(id, status="new", order=0, **fields):
    """Helper to build a ticket with sensible defaults."""
    fields.setdefault("title", f"Ticket {id}")
    fields.setdefault("requester", CAROL)
    fields.setdefault("request_for", fields["requester"])
    fields.setdefault("created_at", CREATED)
    if "labels" in fields:
        fields["labels"] = tuple(fields["labels"])
    return Ticket(id=str(id), status=status, order=order, **fields)


def _orders(tickets, ids=None):
    """Map ticket id to order, optionally limited to ids."""
    return {t.id: t.order for t in tickets if ids is None or t.id in ids}


@pytest.fixture
def references():
    return ReferenceData(statuses=STATUSES, assignees=(ALICE, BOB), labels=(BUG, UI, DOCS))


@pytest.fixture
def tickets():
    """Two status columns: new [1, 2, 3], in-progress [4, 5]."""
    return [
        _make_ticket("1", "new", 0, assignee=ALICE, priority="low", labels=[BUG, UI]),
        _make_ticket("2", "new", 1, assignee=BOB, priority="high", labels=[UI]),
        _make_ticket("3", "new", 2, priority="severe"),
        _make_ticket("4", "in-progress", 0, assignee=ALICE, priority="medium", labels=[DOCS]),
        _make_ticket("5", "in-progress", 1, priority="none", labels=[BUG]),
    ]
