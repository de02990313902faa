"""Load a board from a YAML board file."""

from datetime import datetime, timezone
from pathlib import Path

import yaml

from ticketboard.models import Board, Label, ReferenceData, Requester, Status, Ticket


def _requester(raw, roster: dict[str, Requester]) -> Requester | None:
    """Parse a person given as an email (looked up in roster) or a {name, email} mapping."""
    if not raw:
        return None
    if isinstance(raw, str):
        return roster.get(raw) or Requester(name=raw, email=raw)
    if not isinstance(raw, dict):
        raise TypeError(f"expected an email or a name/email mapping, got {raw!r}")
    return Requester(name=str(raw.get("name", "")), email=str(raw.get("email", "")))


def _labels(raw, known: dict[str, Label]) -> tuple[Label, ...]:
    """Resolve label ids; unknown ids become bare labels."""
    return tuple(known.get(str(lid)) or Label(id=str(lid), name=str(lid)) for lid in raw or [])


def _timestamp(raw) -> datetime:
    """Parse created_at. YAML may already have produced a datetime."""
    if isinstance(raw, datetime):
        value = raw
    elif raw:
        value = datetime.fromisoformat(str(raw))
    else:
        value = datetime.now(timezone.utc)
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def references_from_dict(data: dict) -> ReferenceData:
    """Build reference data from the statuses/assignees/labels sections."""
    statuses = tuple(
        Status(
            id=str(s["id"]),
            name=str(s.get("name", s["id"])),
            color=str(s.get("color", "")),
            order=int(s.get("order", i)),
        )
        for i, s in enumerate(data.get("statuses") or [])
    )
    assignees = tuple(_requester(a, {}) for a in data.get("assignees") or [])
    labels = tuple(
        Label(id=str(lb["id"]), name=str(lb.get("name", lb["id"])), color=str(lb.get("color", "")))
        for lb in data.get("labels") or []
    )
    return ReferenceData(statuses=statuses, assignees=assignees, labels=labels)


def ticket_from_dict(raw: dict, references: ReferenceData) -> Ticket:
    """Build a Ticket, resolving people and labels against references."""
    if not isinstance(raw, dict):
        raise TypeError(f"expected a ticket mapping, got {raw!r}")
    roster = {a.email: a for a in references.assignees}
    known_labels = {lb.id: lb for lb in references.labels}
    requester = _requester(raw.get("requester"), roster) or Requester(name="", email="")
    return Ticket(
        id=str(raw["id"]),
        title=str(raw.get("title", "")),
        description=str(raw.get("description") or ""),
        status=str(raw.get("status", "")),
        requester=requester,
        request_for=_requester(raw.get("request_for"), roster) or requester,
        assignee=_requester(raw.get("assignee"), roster),
        priority=str(raw.get("priority", "none")),
        labels=_labels(raw.get("labels"), known_labels),
        order=int(raw.get("order", 0)),
        created_at=_timestamp(raw.get("created_at")),
    )


def board_from_dict(data: dict, path: str = "") -> Board:
    """Build a Board from the parsed YAML document."""
    references = references_from_dict(data)
    tickets = [ticket_from_dict(t, references) for t in data.get("tickets") or []]
    return Board(
        path=path,
        references=references,
        tickets=tickets,
        settings=dict(data.get("settings") or {}),
    )


def load_board(path: str | Path) -> Board:
    """Load a board file.

    Raises FileNotFoundError if it does not exist and ValueError if it is
    not a YAML mapping or a ticket lacks an id.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid board file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid board file {path}: expected a mapping")
    try:
        return board_from_dict(data, str(path))
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid board file {path}: {e!r}") from e
