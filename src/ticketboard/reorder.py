"""Move tickets within and between groups, keeping orders dense.

Within every group under a grouping mode the ``order`` values are
exactly 0..n-1. A move shifts only the tickets between the old and new
positions, so everything else keeps its order and relative position.
All functions return a new list; tickets are never modified in place.
"""

import logging
from dataclasses import dataclass, replace

from ticketboard.grouping import GroupBy, apply_group_key, group_key_of, parse_group_by
from ticketboard.models import ReferenceData, Ticket

logger = logging.getLogger(__name__)


class InvalidMoveError(ValueError):
    """A move was requested with an invalid target order."""


@dataclass(frozen=True)
class MoveEvent:
    """A ticket dropped on a group at a position, as reported by a drag layer."""

    ticket_id: str
    target_group: str
    target_order: int


def _check_order(order) -> None:
    if isinstance(order, bool) or not isinstance(order, int):
        raise InvalidMoveError(f"target order must be an integer, got {order!r}")
    if order < 0:
        raise InvalidMoveError(f"target order must not be negative, got {order}")


def find_index(tickets, ticket_id: str) -> int | None:
    """Index of the ticket with ticket_id, or None."""
    for i, ticket in enumerate(tickets):
        if ticket.id == ticket_id:
            return i
    return None


def group_members(tickets, mode: GroupBy, key: str) -> list[int]:
    """Indexes of the tickets in group key, in collection order."""
    return [i for i, t in enumerate(tickets) if group_key_of(mode, t) == key]


def renumber_group(tickets, mode: "GroupBy | str", key: str) -> list[Ticket]:
    """Rewrite the orders in group key to 0..n-1, keeping their relative order.

    Equal orders keep their collection order.
    """
    mode = parse_group_by(mode)
    result = list(tickets)
    ranked = sorted(group_members(result, mode, key), key=lambda i: result[i].order)
    for new_order, i in enumerate(ranked):
        if result[i].order != new_order:
            result[i] = replace(result[i], order=new_order)
    return result


def normalize_orders(tickets, mode: "GroupBy | str") -> list[Ticket]:
    """Renumber every group under mode so its orders are dense."""
    mode = parse_group_by(mode)
    result = list(tickets)
    keys = dict.fromkeys(group_key_of(mode, t) for t in result)
    for key in keys:
        result = renumber_group(result, mode, key)
    return result


def is_dense(tickets, mode: GroupBy, key: str) -> bool:
    """True if the orders in group key are exactly 0..n-1."""
    orders = sorted(t.order for t in tickets if group_key_of(mode, t) == key)
    return orders == list(range(len(orders)))


def ensure_dense(tickets, mode: GroupBy, keys) -> list[Ticket]:
    """Renumber any of the given groups whose orders are not dense.

    Orders written under a different grouping mode are stale; they are
    recomputed here, on the first write under the current mode.
    """
    result = list(tickets)
    for key in dict.fromkeys(keys):
        if not is_dense(result, mode, key):
            logger.debug("renumbering stale %s group %r", mode.value, key)
            result = renumber_group(result, mode, key)
    return result


def close_gap(tickets, mode: GroupBy, key: str, order: int, skip: int | None = None) -> list[Ticket]:
    """Decrement every order above ``order`` in group key."""
    result = list(tickets)
    for i, ticket in enumerate(result):
        if i != skip and ticket.order > order and group_key_of(mode, ticket) == key:
            result[i] = replace(ticket, order=ticket.order - 1)
    return result


def open_slot(tickets, mode: GroupBy, key: str, order: int, skip: int | None = None) -> list[Ticket]:
    """Increment every order at or above ``order`` in group key."""
    result = list(tickets)
    for i, ticket in enumerate(result):
        if i != skip and ticket.order >= order and group_key_of(mode, ticket) == key:
            result[i] = replace(ticket, order=ticket.order + 1)
    return result


def _reindex(tickets: list[Ticket], index: int, moved: Ticket, mode: GroupBy, target_order: int) -> list[Ticket]:
    """Move within one group by shifting the tickets between the two positions."""
    key = group_key_of(mode, moved)
    old_order = tickets[index].order
    others = [i for i in group_members(tickets, mode, key) if i != index]
    target = min(target_order, len(others))

    if target == old_order:
        logger.debug("ticket %s already at %s, nothing to move", moved.id, target)
        return tickets

    result = list(tickets)
    for i in others:
        order = result[i].order
        if old_order < target and old_order < order <= target:
            result[i] = replace(result[i], order=order - 1)
        elif target < old_order and target <= order < old_order:
            result[i] = replace(result[i], order=order + 1)
    result[index] = replace(moved, order=target)
    return result


def _regroup(
    tickets: list[Ticket],
    index: int,
    moved: Ticket,
    mode: GroupBy,
    old_key: str,
    target_order: int,
) -> list[Ticket]:
    """Move between groups: close the gap in the source, open a slot in the destination."""
    new_key = group_key_of(mode, moved)
    old_order = tickets[index].order
    target = min(target_order, len(group_members(tickets, mode, new_key)))

    result = close_gap(tickets, mode, old_key, old_order, skip=index)
    result = open_slot(result, mode, new_key, target, skip=index)
    result[index] = replace(moved, order=target)
    return result


def move_ticket(
    tickets,
    ticket_id: str,
    target_group: str,
    target_order: int,
    mode: "GroupBy | str",
    references: ReferenceData | None = None,
    strict: bool = False,
) -> list[Ticket]:
    """Move a ticket to target_order in target_group and return the new collection.

    A missing ticket_id is ignored: stale drag events are expected. The
    target order is clamped to the end of the target group. If the target
    group cannot be resolved to a concrete status, person, priority or
    label, the ticket is reordered within its current group and its
    attribute is left alone (or UnresolvedReferenceError is raised when
    strict). Raises InvalidMoveError for negative or non-integer orders.
    """
    _check_order(target_order)
    mode = parse_group_by(mode)
    tickets = list(tickets)

    index = find_index(tickets, ticket_id)
    if index is None:
        logger.debug("ticket %s not found, move ignored", ticket_id)
        return tickets

    current = tickets[index]
    old_key = group_key_of(mode, current)
    if target_group == old_key:
        # Already in the target group, nothing to resolve
        regrouped = current
    else:
        regrouped = apply_group_key(mode, current, target_group, references, strict)
    new_key = group_key_of(mode, regrouped)

    tickets = ensure_dense(tickets, mode, (old_key, new_key))
    moved = replace(regrouped, order=tickets[index].order)

    if new_key == old_key:
        return _reindex(tickets, index, moved, mode, target_order)
    return _regroup(tickets, index, moved, mode, old_key, target_order)


def apply_move(
    tickets,
    event: MoveEvent,
    mode: "GroupBy | str",
    references: ReferenceData | None = None,
    strict: bool = False,
) -> list[Ticket]:
    """Apply a MoveEvent with move_ticket."""
    return move_ticket(
        tickets,
        event.ticket_id,
        event.target_group,
        event.target_order,
        mode,
        references=references,
        strict=strict,
    )


def drop_on_ticket(tickets, ticket_id: str, over_id: str, mode: "GroupBy | str") -> MoveEvent | None:
    """Build the move for dropping ticket_id onto the ticket over_id.

    The dropped ticket takes over_id's group and current order. Returns
    None if over_id is unknown.
    """
    mode = parse_group_by(mode)
    index = find_index(tickets, over_id)
    if index is None:
        return None
    over = tickets[index]
    return MoveEvent(ticket_id=ticket_id, target_group=group_key_of(mode, over), target_order=over.order)
