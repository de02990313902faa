"""Ticket lifecycle operations: create, update, delete."""

import logging
from dataclasses import replace
from datetime import datetime, timezone

from ticketboard.grouping import GroupBy, group_key_of, parse_group_by
from ticketboard.ids import max_id, next_id
from ticketboard.models import Label, Requester, Ticket
from ticketboard.reorder import close_gap, ensure_dense, find_index, group_members, open_slot

logger = logging.getLogger(__name__)


def find_ticket(tickets, ticket_id: str) -> Ticket | None:
    """Find a ticket by id."""
    index = find_index(tickets, ticket_id)
    return None if index is None else tickets[index]


def create_ticket(
    tickets,
    title: str,
    status: str,
    requester: Requester,
    mode: "GroupBy | str" = GroupBy.STATUS,
    *,
    request_for: Requester | None = None,
    description: str = "",
    assignee: Requester | None = None,
    priority: str = "none",
    labels: "tuple[Label, ...] | list[Label]" = (),
    now: datetime | None = None,
) -> tuple[list[Ticket], Ticket]:
    """Create a ticket at the end of its group under mode.

    Returns (tickets, ticket).
    """
    mode = parse_group_by(mode)
    tickets = list(tickets)
    ticket = Ticket(
        id=next_id(max_id(t.id for t in tickets)),
        title=title,
        status=status,
        requester=requester,
        request_for=request_for or requester,
        description=description,
        assignee=assignee,
        priority=priority,
        labels=tuple(labels),
        created_at=now or datetime.now(timezone.utc),
    )
    key = group_key_of(mode, ticket)
    tickets = ensure_dense(tickets, mode, (key,))
    ticket = replace(ticket, order=len(group_members(tickets, mode, key)))
    tickets.append(ticket)
    return tickets, ticket


def update_ticket(tickets, updated: Ticket, mode: "GroupBy | str" = GroupBy.STATUS) -> list[Ticket]:
    """Replace the ticket with updated.id, keeping its group dense.

    ``id`` and ``created_at`` cannot change. If the ticket stays in its
    group it moves to ``updated.order`` (clamped); if it changes group it
    goes to the end of the new one. An unknown id is ignored.
    """
    mode = parse_group_by(mode)
    tickets = list(tickets)
    index = find_index(tickets, updated.id)
    if index is None:
        logger.debug("ticket %s not found, update ignored", updated.id)
        return tickets

    old_key = group_key_of(mode, tickets[index])
    new_key = group_key_of(mode, updated)
    tickets = ensure_dense(tickets, mode, (old_key, new_key))
    old = tickets[index]

    tickets = close_gap(tickets, mode, old_key, old.order, skip=index)
    size = sum(1 for i in group_members(tickets, mode, new_key) if i != index)
    position = min(updated.order, size) if new_key == old_key else size
    position = max(position, 0)
    tickets = open_slot(tickets, mode, new_key, position, skip=index)
    tickets[index] = replace(updated, created_at=old.created_at, order=position)
    return tickets


def delete_ticket(tickets, ticket_id: str, mode: "GroupBy | str" = GroupBy.STATUS) -> list[Ticket]:
    """Remove a ticket and close the gap it leaves in its group.

    An unknown id is ignored.
    """
    mode = parse_group_by(mode)
    tickets = list(tickets)
    index = find_index(tickets, ticket_id)
    if index is None:
        logger.debug("ticket %s not found, delete ignored", ticket_id)
        return tickets

    key = group_key_of(mode, tickets[index])
    tickets = ensure_dense(tickets, mode, (key,))
    removed = tickets.pop(index)
    return close_gap(tickets, mode, key, removed.order)
