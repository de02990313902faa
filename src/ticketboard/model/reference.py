"""Reference data operations: statuses, labels and the derived requester view."""

from dataclasses import replace

from ticketboard.filters import ALL_STATUSES, normalize_status_id
from ticketboard.ids import label_id
from ticketboard.models import Label, Requester, Status
from ticketboard.palette import color_for_label


def add_label(labels, name: str, color: str | None = None) -> tuple[list[Label], Label]:
    """Add a label whose id is derived from name.

    Returns (labels, label). If a label with the same id already exists,
    the list is returned unchanged along with the existing label.
    """
    labels = list(labels)
    new_id = label_id(name)
    for label in labels:
        if label.id == new_id:
            return labels, label
    label = Label(id=new_id, name=name, color=color or color_for_label(name))
    labels.append(label)
    return labels, label


def reorder_statuses(statuses, from_index: int, to_index: int) -> list[Status]:
    """Move the status at from_index to to_index and renumber every order."""
    reordered = list(statuses)
    status = reordered.pop(from_index)
    reordered.insert(to_index, status)
    return [s if s.order == i else replace(s, order=i) for i, s in enumerate(reordered)]


def derive_requesters(tickets) -> list[Requester]:
    """Distinct requesters across tickets, keyed by email.

    Emails keep first-seen order; the last ticket seen wins the name.
    """
    by_email: dict[str, Requester] = {}
    for ticket in tickets:
        by_email[ticket.requester.email] = ticket.requester
    return list(by_email.values())


def status_color(value: str, statuses) -> str | None:
    """Colour of the status a filter value names, or None."""
    if value == ALL_STATUSES:
        return None
    status_id = normalize_status_id(value)
    for status in statuses:
        if status.id == status_id:
            return status.color
    return None
