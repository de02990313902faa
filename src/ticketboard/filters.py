"""Ticket filtering by search text, status, labels and people."""

from dataclasses import dataclass

from ticketboard.models import Ticket

ALL_STATUSES = "all"

# Status values used by filter controls that differ from status ids.
STATUS_SYNONYMS: dict[str, str] = {
    "waiting-for-vendor": "waiting-vendor",
    "waiting-for-requester": "waiting-requester",
}


@dataclass(frozen=True)
class TicketFilters:
    """Filter criteria. Every criterion is optional; present ones are ANDed."""

    search: str = ""
    status: str | None = None
    labels: tuple[str, ...] = ()
    assignee: str | None = None
    requester: str | None = None
    request_for: str | None = None


def normalize_status_id(value: str) -> str:
    """Map a filter control's status value to a status id."""
    return STATUS_SYNONYMS.get(value, value)


def _matches_search(ticket: Ticket, needle: str) -> bool:
    """Case-insensitive substring match on title, description, requester or label names."""
    if needle in ticket.title.lower():
        return True
    if ticket.description and needle in ticket.description.lower():
        return True
    if needle in ticket.requester.name.lower():
        return True
    return any(needle in label.name.lower() for label in ticket.labels)


def filter_tickets(tickets, criteria: TicketFilters | None = None) -> list[Ticket]:
    """Return the tickets matching every criterion that is set.

    Never mutates the input. Empty criteria filter nothing.
    """
    filtered = list(tickets)
    if criteria is None:
        return filtered

    if criteria.search:
        needle = criteria.search.lower()
        filtered = [t for t in filtered if _matches_search(t, needle)]

    if criteria.status and criteria.status != ALL_STATUSES:
        status_id = normalize_status_id(criteria.status)
        filtered = [t for t in filtered if t.status == status_id]

    if criteria.labels:
        wanted = set(criteria.labels)
        filtered = [t for t in filtered if any(label.id in wanted for label in t.labels)]

    if criteria.assignee:
        filtered = [t for t in filtered if t.assignee is not None and t.assignee.email == criteria.assignee]

    if criteria.requester:
        filtered = [t for t in filtered if t.requester.email == criteria.requester]

    if criteria.request_for:
        filtered = [t for t in filtered if t.request_for.email == criteria.request_for]

    return filtered
