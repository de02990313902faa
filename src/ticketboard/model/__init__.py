"""Ticket collection state and mutation operations."""

from ticketboard.model.board import BoardState
from ticketboard.model.reference import add_label, derive_requesters, reorder_statuses, status_color
from ticketboard.model.store import TicketStore
from ticketboard.model.ticket import create_ticket, delete_ticket, find_ticket, update_ticket

__all__ = [
    "BoardState",
    "TicketStore",
    "add_label",
    "create_ticket",
    "delete_ticket",
    "derive_requesters",
    "find_ticket",
    "reorder_statuses",
    "status_color",
    "update_ticket",
]
