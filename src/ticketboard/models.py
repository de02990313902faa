"""Data models for ticket boards."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

PRIORITIES: tuple[str, ...] = ("severe", "high", "medium", "low", "none")
PRIORITY_ORDER: dict[str, int] = {p: i for i, p in enumerate(PRIORITIES)}


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Requester:
    """A person: requester, request-for or assignee. Email is the natural key."""

    name: str
    email: str


@dataclass(frozen=True)
class Label:
    """A label; id is derived from the name when created."""

    id: str
    name: str
    color: str = ""


@dataclass(frozen=True)
class Status:
    """A workflow status, displayed as a column in status grouping."""

    id: str
    name: str
    color: str = ""
    order: int = 0


@dataclass(frozen=True)
class Ticket:
    """A ticket. Instances are never mutated; use dataclasses.replace.

    ``order`` is only meaningful relative to the grouping mode that
    produced it.
    """

    id: str
    title: str
    status: str
    requester: Requester
    request_for: Requester
    description: str = ""
    assignee: Requester | None = None
    priority: str = "none"
    labels: tuple[Label, ...] = ()
    order: int = 0
    created_at: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class GroupColumn:
    """A derived board column. Never persisted."""

    id: str
    name: str
    order: int
    color: str | None = None


@dataclass(frozen=True)
class ReferenceData:
    """Immutable snapshot of the reference sets that grouping reads."""

    statuses: tuple[Status, ...] = ()
    assignees: tuple[Requester, ...] = ()
    labels: tuple[Label, ...] = ()


@dataclass
class Board:
    """A loaded board file: reference data, tickets and settings."""

    path: str = ""
    references: ReferenceData = field(default_factory=ReferenceData)
    tickets: list[Ticket] = field(default_factory=list)
    settings: dict[str, Any] = field(default_factory=dict)
