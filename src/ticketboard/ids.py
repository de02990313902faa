"""Ticket ID ordering and generation, and label ID derivation."""

import re

_WHITESPACE = re.compile(r"\s+")


def normalize_id(s: str) -> str:
    """Strip leading zeros from a ticket ID, preserving at least one digit.

    "001" → "1", "0" → "0", "010" → "10"
    """
    return s.lstrip("0") or "0"


def id_sort_key(ticket_id: str) -> tuple[int, str]:
    """Sort key that orders numeric IDs by value, ignoring leading zeros."""
    significant = normalize_id(ticket_id)
    return len(significant), significant


def max_id(ids) -> str | None:
    """The highest ticket ID, or None if there are none."""
    return max(ids, key=id_sort_key, default=None)


def next_id(current_max: str | None) -> str:
    """The ticket ID after current_max.

    None gives "1", "9" gives "10". A non-numeric ID such as "fish" gives
    "1" followed by one zero per character ("10000"), which sorts above it.
    """
    if current_max is None:
        return "1"
    if current_max.isdigit():
        return str(int(current_max) + 1)
    return "1" + "0" * len(current_max)


def label_id(name: str) -> str:
    """Derive a label ID from its name: lowercase, whitespace runs to hyphens.

    "Bug Fix" → "bug-fix". Two labels with the same name share an ID.
    """
    return _WHITESPACE.sub("-", name.lower())
