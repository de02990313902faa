"""Board state: the ticket store plus the view settings that shape it."""

from __future__ import annotations

import logging
from dataclasses import replace

from ticketboard.filters import TicketFilters, filter_tickets
from ticketboard.grouping import GroupBy, columns_of, parse_group_by
from ticketboard.model.reference import add_label, reorder_statuses
from ticketboard.model.store import TicketStore
from ticketboard.model.ticket import create_ticket, delete_ticket, update_ticket
from ticketboard.models import GroupColumn, Label, ReferenceData, Requester, Ticket
from ticketboard.projection import SortDirection, parse_sort_direction, project
from ticketboard.reorder import MoveEvent, apply_move, drop_on_ticket

logger = logging.getLogger(__name__)

# asc -> desc -> off -> asc
_NEXT_SORT = {None: SortDirection.ASC, SortDirection.ASC: SortDirection.DESC, SortDirection.DESC: None}


class BoardState:
    """A ticket store with reference data, grouping mode, filters and column sorts.

    Every mutation reads the whole collection, computes a new one and
    writes it back with a single ``store.replace``.
    """

    def __init__(
        self,
        store: TicketStore | None = None,
        references: ReferenceData | None = None,
        group_by: GroupBy | str = GroupBy.STATUS,
        strict_references: bool = False,
    ) -> None:
        self.store = store or TicketStore()
        self.references = references or ReferenceData()
        self.group_by = parse_group_by(group_by)
        self.strict_references = strict_references
        self.filters = TicketFilters()
        self.column_sort: dict[str, SortDirection | None] = {}

    def set_group_by(self, mode: GroupBy | str) -> GroupBy:
        """Switch grouping mode. Stored orders are left as they are."""
        self.group_by = parse_group_by(mode)
        return self.group_by

    def columns(self) -> list[GroupColumn]:
        refs = self.references
        return columns_of(self.group_by, refs.statuses, refs.assignees, refs.labels)

    def visible_tickets(self) -> list[Ticket]:
        return filter_tickets(self.store.read(), self.filters)

    def grouped(self) -> dict[str, list[Ticket]]:
        """Filtered tickets grouped into the current columns."""
        return project(self.visible_tickets(), self.group_by, self.columns(), self.column_sort)

    def toggle_sort(self, column_id: str) -> SortDirection | None:
        """Cycle a column's priority sort: off, asc, desc, off."""
        current = parse_sort_direction(self.column_sort.get(column_id))
        direction = _NEXT_SORT[current]
        if direction is None:
            self.column_sort.pop(column_id, None)
        else:
            self.column_sort[column_id] = direction
        return direction

    # --- ticket mutations ---

    def move(self, ticket_id: str, target_group: str, target_order: int) -> bool:
        """Move a ticket. Returns True if the collection changed."""
        return self.apply(MoveEvent(ticket_id, target_group, target_order))

    def apply(self, event: MoveEvent) -> bool:
        """Apply a move event from the drag layer."""
        tickets = apply_move(
            self.store.read(),
            event,
            self.group_by,
            references=self.references,
            strict=self.strict_references,
        )
        changed = self.store.replace(tickets)
        if changed:
            logger.info("moved ticket %s to %s at %s", event.ticket_id, event.target_group, event.target_order)
        return changed

    def drop_on(self, ticket_id: str, over_id: str) -> bool:
        """Drop a ticket onto another ticket, taking its group and position."""
        event = drop_on_ticket(self.store.read(), ticket_id, over_id, self.group_by)
        if event is None:
            logger.debug("drop target %s not found", over_id)
            return False
        return self.apply(event)

    def add_ticket(self, title: str, status: str, requester: Requester, **fields) -> Ticket:
        tickets, ticket = create_ticket(self.store.read(), title, status, requester, self.group_by, **fields)
        self.store.replace(tickets)
        logger.info("created ticket %s", ticket.id)
        return ticket

    def update_ticket(self, ticket: Ticket) -> bool:
        return self.store.replace(update_ticket(self.store.read(), ticket, self.group_by))

    def delete_ticket(self, ticket_id: str) -> bool:
        return self.store.replace(delete_ticket(self.store.read(), ticket_id, self.group_by))

    # --- reference data ---

    def add_label(self, name: str, color: str | None = None) -> Label:
        labels, label = add_label(self.references.labels, name, color)
        self.references = replace(self.references, labels=tuple(labels))
        return label

    def reorder_statuses(self, from_index: int, to_index: int) -> None:
        statuses = reorder_statuses(self.references.statuses, from_index, to_index)
        self.references = replace(self.references, statuses=tuple(statuses))

    def requesters(self) -> list[Requester]:
        return self.store.requesters()
