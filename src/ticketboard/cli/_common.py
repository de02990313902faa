"""Shared helpers for CLI command handlers."""

import json
import logging
import re
import sys
from pathlib import Path

from ticketboard.config import load_config
from ticketboard.filters import TicketFilters
from ticketboard.loader import load_board
from ticketboard.model.board import BoardState
from ticketboard.model.store import TicketStore
from ticketboard.models import Board, Requester, Ticket
from ticketboard.writer import save_board

_PERSON = re.compile(r"^\s*(.*?)\s*<([^>]+)>\s*$")


def configure_logging(verbose: bool) -> None:
    """Set up stderr logging at DEBUG if verbose, else the configured level."""
    level = "DEBUG" if verbose else str(load_config()["log_level"]).upper()
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=getattr(logging, level, logging.WARNING),
    )


def board_path(args) -> Path:
    """The board file: --board, else the configured board_file."""
    return Path(args.board or load_config()["board_file"]).resolve()


def load_board_or_die(args) -> tuple[Board, BoardState]:
    """Load the board file and wrap it in a BoardState. Exit 1 on failure."""
    path = board_path(args)
    try:
        board = load_board(path)
    except FileNotFoundError:
        error(f"Board file '{path}' not found. Run 'ticketboard init' first.", args.json)
    except ValueError as e:
        error(str(e), args.json)

    config = load_config(board.settings)
    state = BoardState(
        TicketStore(board.tickets),
        board.references,
        group_by=getattr(args, "group_by", None) or config["group_by"],
        strict_references=config["strict_references"],
    )
    return board, state


def save(board: Board, state: BoardState) -> Path:
    """Write the state's tickets and references back to the board file."""
    board.tickets = state.store.read()
    board.references = state.references
    return save_board(board)


def find_ticket_or_die(state: BoardState, ticket_id: str, json_mode: bool) -> Ticket:
    """Lookup ticket by ID. Exit 1 if not found."""
    ticket = state.store.get(ticket_id)
    if ticket is not None:
        return ticket
    error(f"Ticket '{ticket_id}' not found.", json_mode)


def parse_person(text: str, known: list[Requester]) -> Requester:
    """Parse 'Name <email>' or a bare email, preferring a known person's record."""
    match = _PERSON.match(text)
    name, email = (match.group(1), match.group(2).strip()) if match else ("", text.strip())
    for person in known:
        if person.email == email:
            return person
    return Requester(name=name or email, email=email)


def add_filter_arguments(parser) -> None:
    """Add the ticket filter options to a parser."""
    parser.add_argument("--search", default="", help="Match title, description, requester or label")
    parser.add_argument("--status", help="Status id (or 'all')")
    parser.add_argument("--label", dest="labels", action="append", default=[], help="Label id (repeatable, any)")
    parser.add_argument("--assignee", help="Assignee email")
    parser.add_argument("--requester", help="Requester email")
    parser.add_argument("--request-for", dest="request_for", help="Request-for email")


def filters_from_args(args) -> TicketFilters:
    return TicketFilters(
        search=args.search or "",
        status=args.status,
        labels=tuple(args.labels or ()),
        assignee=args.assignee,
        requester=args.requester,
        request_for=args.request_for,
    )


def ticket_to_json(ticket: Ticket) -> dict:
    """Ticket as a JSON-friendly dict."""
    return {
        "id": ticket.id,
        "title": ticket.title,
        "description": ticket.description,
        "status": ticket.status,
        "priority": ticket.priority,
        "order": ticket.order,
        "requester": {"name": ticket.requester.name, "email": ticket.requester.email},
        "request_for": {"name": ticket.request_for.name, "email": ticket.request_for.email},
        "assignee": ticket.assignee.email if ticket.assignee else None,
        "labels": [label.id for label in ticket.labels],
        "created_at": ticket.created_at.isoformat(),
    }


def format_ticket_line(ticket: Ticket, indent: str = "") -> str:
    """Format a ticket as a single text line."""
    labels = f"  [{', '.join(label.name for label in ticket.labels)}]" if ticket.labels else ""
    return f"{indent}{ticket.id:>4}  {ticket.priority:<7} {ticket.title}{labels}"


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)
