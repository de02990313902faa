"""Project tickets into ordered columns for display."""

import logging
from enum import Enum

from ticketboard.grouping import GroupBy, group_key_of, parse_group_by
from ticketboard.models import PRIORITY_ORDER, GroupColumn, Ticket

logger = logging.getLogger(__name__)


class SortDirection(str, Enum):
    """Display-only priority sort for a column."""

    ASC = "asc"
    DESC = "desc"


def parse_sort_direction(value: "SortDirection | str | None") -> SortDirection | None:
    """Parse 'asc', 'desc', 'off' or None. Anything else means off."""
    if value is None or isinstance(value, SortDirection):
        return value
    try:
        return SortDirection(value)
    except ValueError:
        return None


def _priority_rank(ticket: Ticket) -> int:
    return PRIORITY_ORDER.get(ticket.priority, len(PRIORITY_ORDER))


def sort_by_priority(tickets, direction: "SortDirection | str | None") -> list[Ticket]:
    """Stable sort by priority rank (severe first for asc).

    Tickets of equal priority keep their relative order. Returns a new list.
    """
    direction = parse_sort_direction(direction)
    if direction is None:
        return list(tickets)
    return sorted(tickets, key=_priority_rank, reverse=direction is SortDirection.DESC)


def project(
    tickets,
    mode: "GroupBy | str",
    columns: list[GroupColumn],
    sort: dict | None = None,
) -> dict[str, list[Ticket]]:
    """Group tickets into columns, each ordered by ascending ``order``.

    Every column gets a list, even when empty. Tickets whose group key
    matches no column are left out. ``sort`` maps column id to a sort
    direction applied on top of the manual order; stored orders are
    never touched.
    """
    mode = parse_group_by(mode)
    grouped: dict[str, list[Ticket]] = {column.id: [] for column in columns}

    for ticket in tickets:
        key = group_key_of(mode, ticket)
        bucket = grouped.get(key)
        if bucket is None:
            logger.debug("ticket %s: no %s column %r, not shown", ticket.id, mode.value, key)
            continue
        bucket.append(ticket)

    for key, bucket in grouped.items():
        bucket.sort(key=lambda t: t.order)
        direction = (sort or {}).get(key)
        if direction is not None:
            grouped[key] = sort_by_priority(bucket, direction)

    return grouped
