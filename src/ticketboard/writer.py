"""Save a board to a YAML board file in one atomic write."""

import os
import tempfile
from pathlib import Path

import yaml

from ticketboard.models import Board, Requester, Ticket


def _person(person: Requester) -> dict:
    return {"name": person.name, "email": person.email}


def ticket_to_dict(ticket: Ticket) -> dict:
    """Serialize a ticket; assignee and labels are stored by reference."""
    data = {
        "id": ticket.id,
        "title": ticket.title,
        "status": ticket.status,
        "priority": ticket.priority,
        "order": ticket.order,
        "requester": _person(ticket.requester),
        "request_for": _person(ticket.request_for),
        "assignee": ticket.assignee.email if ticket.assignee else None,
        "labels": [label.id for label in ticket.labels],
        "created_at": ticket.created_at.isoformat(),
    }
    if ticket.description:
        data["description"] = ticket.description
    return data


def board_to_dict(board: Board) -> dict:
    """Serialize a board to plain data."""
    refs = board.references
    data: dict = {}
    if board.settings:
        data["settings"] = dict(board.settings)
    data["statuses"] = [{"id": s.id, "name": s.name, "color": s.color, "order": s.order} for s in refs.statuses]
    data["labels"] = [{"id": lb.id, "name": lb.name, "color": lb.color} for lb in refs.labels]
    data["assignees"] = [_person(a) for a in refs.assignees]
    data["tickets"] = [ticket_to_dict(t) for t in board.tickets]
    return data


def save_board(board: Board, path: str | Path | None = None) -> Path:
    """Write the board file via a temp file and rename. Returns the path."""
    path = Path(path or board.path)
    text = yaml.safe_dump(board_to_dict(board), default_flow_style=False, sort_keys=False, allow_unicode=True)

    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, path)
    except BaseException:
        os.unlink(tmp)
        raise
    return path
