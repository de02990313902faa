"""Grouping strategies: which column a ticket belongs to under each mode."""

import logging
from dataclasses import replace
from enum import Enum
from typing import assert_never

from ticketboard.models import (
    PRIORITIES,
    GroupColumn,
    Label,
    ReferenceData,
    Requester,
    Status,
    Ticket,
)

logger = logging.getLogger(__name__)

UNASSIGNED = "unassigned"
NO_LABELS = "no-labels"


class GroupBy(str, Enum):
    """The attribute tickets are grouped into columns by."""

    STATUS = "status"
    ASSIGNEE = "assignee"
    PRIORITY = "priority"
    LABEL = "label"


class UnresolvedReferenceError(LookupError):
    """A group key does not name any known status, person, priority or label."""

    def __init__(self, mode: GroupBy, key: str) -> None:
        super().__init__(f"No {mode.value} matches group '{key}'")
        self.mode = mode
        self.key = key


def parse_group_by(value: "GroupBy | str | None") -> GroupBy:
    """Parse a grouping mode name. Unknown names fall back to status."""
    if isinstance(value, GroupBy):
        return value
    try:
        return GroupBy(value)
    except ValueError:
        logger.debug("unknown grouping mode %r, using status", value)
        return GroupBy.STATUS


def group_key_of(mode: GroupBy, ticket: Ticket) -> str:
    """Return the key of the group the ticket falls in under mode.

    Only the first label takes part in label grouping.
    """
    match mode:
        case GroupBy.STATUS:
            return ticket.status
        case GroupBy.ASSIGNEE:
            if ticket.assignee is not None and ticket.assignee.email:
                return ticket.assignee.email
            return UNASSIGNED
        case GroupBy.PRIORITY:
            return ticket.priority
        case GroupBy.LABEL:
            return ticket.labels[0].id if ticket.labels else NO_LABELS
        case _:
            assert_never(mode)


def columns_of(
    mode: GroupBy,
    statuses: "list[Status] | tuple[Status, ...]",
    assignees: "list[Requester] | tuple[Requester, ...]",
    labels: "list[Label] | tuple[Label, ...]",
) -> list[GroupColumn]:
    """Build the ordered column descriptors for a grouping mode."""
    match mode:
        case GroupBy.STATUS:
            return [GroupColumn(id=s.id, name=s.name, order=s.order, color=s.color) for s in statuses]
        case GroupBy.ASSIGNEE:
            columns = [GroupColumn(id=a.email, name=a.name, order=i) for i, a in enumerate(assignees)]
            columns.append(GroupColumn(id=UNASSIGNED, name="Unassigned", order=len(assignees)))
            return columns
        case GroupBy.PRIORITY:
            return [GroupColumn(id=p, name=p.capitalize(), order=i) for i, p in enumerate(PRIORITIES)]
        case GroupBy.LABEL:
            columns = [GroupColumn(id=lb.id, name=lb.name, order=i, color=lb.color) for i, lb in enumerate(labels)]
            columns.append(GroupColumn(id=NO_LABELS, name="No Labels", order=len(labels)))
            return columns
        case _:
            assert_never(mode)


def _unresolved(mode: GroupBy, ticket: Ticket, key: str, strict: bool) -> Ticket:
    if strict:
        raise UnresolvedReferenceError(mode, key)
    logger.debug("ticket %s: no %s matches %r, attribute left unchanged", ticket.id, mode.value, key)
    return ticket


def apply_group_key(
    mode: GroupBy,
    ticket: Ticket,
    key: str,
    references: ReferenceData | None = None,
    strict: bool = False,
) -> Ticket:
    """Return ticket with its grouping attribute set so it lands in group key.

    Keys are resolved back to concrete references. A key that matches
    nothing leaves the ticket unchanged, or raises UnresolvedReferenceError
    when strict. Without references, status keys are taken as given and
    only the sentinel assignee/label groups resolve.
    """
    refs = references or ReferenceData()
    match mode:
        case GroupBy.STATUS:
            if refs.statuses and key not in {s.id for s in refs.statuses}:
                return _unresolved(mode, ticket, key, strict)
            return replace(ticket, status=key)
        case GroupBy.ASSIGNEE:
            if key == UNASSIGNED:
                return replace(ticket, assignee=None)
            for person in refs.assignees:
                if person.email == key:
                    return replace(ticket, assignee=person)
            return _unresolved(mode, ticket, key, strict)
        case GroupBy.PRIORITY:
            if key not in PRIORITIES:
                return _unresolved(mode, ticket, key, strict)
            return replace(ticket, priority=key)
        case GroupBy.LABEL:
            if key == NO_LABELS:
                return replace(ticket, labels=())
            for label in refs.labels:
                if label.id == key:
                    # Only the first label is replaced, the rest stay as they are
                    return replace(ticket, labels=(label, *ticket.labels[1:]))
            return _unresolved(mode, ticket, key, strict)
        case _:
            assert_never(mode)
