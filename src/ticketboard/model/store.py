"""The canonical ticket collection, with versioning and change notification."""

from __future__ import annotations

from typing import Callable

from ticketboard.model.reference import derive_requesters
from ticketboard.models import Requester, Ticket

Callback = Callable[["TicketStore", "tuple[Ticket, ...]", "tuple[Ticket, ...]"], None]


class TicketStore:
    """Holds the whole ticket collection and swaps it atomically.

    Readers get a snapshot; the only write is ``replace``, which swaps the
    entire collection in one assignment. Each effective replace bumps
    ``version`` and fires watchers with (store, old, new).
    """

    def __init__(self, tickets=()) -> None:
        self._tickets: tuple[Ticket, ...] = tuple(tickets)
        self._watchers: list[Callback] = []
        self._version = 0
        self._requesters: tuple[int, list[Requester]] | None = None

    @property
    def version(self) -> int:
        """Incremented by every replace that changed the collection."""
        return self._version

    def read(self) -> list[Ticket]:
        """Return a snapshot of all tickets."""
        return list(self._tickets)

    def replace(self, tickets) -> bool:
        """Replace the whole collection. Returns False if nothing changed."""
        old = self._tickets
        new = tuple(tickets)
        if old == new:
            return False
        self._tickets = new
        self._version += 1
        for cb in list(self._watchers):
            cb(self, old, new)
        return True

    def watch(self, callback: Callback) -> Callable[[], None]:
        """Call callback after every effective replace. Returns an unwatch callable."""
        self._watchers.append(callback)

        def unwatch() -> None:
            if callback in self._watchers:
                self._watchers.remove(callback)

        return unwatch

    def get(self, ticket_id: str) -> Ticket | None:
        """Look up one ticket by id."""
        for ticket in self._tickets:
            if ticket.id == ticket_id:
                return ticket
        return None

    def requesters(self) -> list[Requester]:
        """Distinct requesters across all tickets, memoized per version."""
        if self._requesters is None or self._requesters[0] != self._version:
            self._requesters = (self._version, derive_requesters(self._tickets))
        return list(self._requesters[1])

    def __len__(self) -> int:
        return len(self._tickets)

    def __iter__(self):
        return iter(self._tickets)

    def __repr__(self) -> str:
        return f"<TicketStore v{self._version} [{len(self._tickets)} tickets]>"
