"""CLI argument parser and dispatch for ticketboard."""

import argparse

from ticketboard.cli._common import add_filter_arguments
from ticketboard.cli.board import board_show
from ticketboard.cli.init import init_board
from ticketboard.cli.label import label_add, label_list
from ticketboard.cli.people import assignee_list, requester_list
from ticketboard.cli.status import status_list, status_move
from ticketboard.cli.ticket import (
    ticket_add,
    ticket_delete,
    ticket_get,
    ticket_list,
    ticket_move,
    ticket_set,
)
from ticketboard.grouping import GroupBy
from ticketboard.models import PRIORITIES

GROUP_BY_CHOICES = [mode.value for mode in GroupBy]


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--board", default=None, help="Path to board file (default: $TICKETBOARD_BOARD_FILE or tickets.yaml)")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")

    # Same flags for nouns and verbs, without defaults so they never overwrite
    # a value given before the noun
    sub_common = argparse.ArgumentParser(add_help=False)
    sub_common.add_argument("--board", default=argparse.SUPPRESS, help="Path to board file")
    sub_common.add_argument("--json", action="store_true", default=argparse.SUPPRESS, help="Machine-readable JSON output")
    sub_common.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Debug logging to stderr")

    parser = argparse.ArgumentParser(
        prog="ticketboard",
        description="Kanban ticket tracker",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- init ---
    init_p = nouns.add_parser("init", help="Write a sample board file", parents=[sub_common])
    init_p.add_argument("--force", action="store_true", help="Overwrite an existing board file")
    init_p.set_defaults(func=init_board)

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[sub_common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_show_p = board_verbs.add_parser("show", help="Show tickets grouped into columns", parents=[sub_common])
    board_show_p.add_argument("--group-by", dest="group_by", choices=GROUP_BY_CHOICES, help="Grouping mode")
    board_show_p.add_argument(
        "--sort", action="append", default=[], help="Priority sort for a column: COLUMN=asc|desc|off (repeatable)"
    )
    board_show_p.add_argument("--hide-empty", dest="hide_empty", action="store_true", help="Hide empty columns")
    add_filter_arguments(board_show_p)
    board_show_p.set_defaults(func=board_show)

    # board with no verb = show
    board_p.set_defaults(
        func=board_show,
        group_by=None,
        sort=[],
        hide_empty=False,
        search="",
        status=None,
        labels=[],
        assignee=None,
        requester=None,
        request_for=None,
    )

    # --- ticket ---
    ticket_p = nouns.add_parser("ticket", help="Ticket operations", parents=[sub_common])
    ticket_verbs = ticket_p.add_subparsers(dest="verb")

    ticket_list_p = ticket_verbs.add_parser("list", help="List tickets", parents=[sub_common])
    add_filter_arguments(ticket_list_p)
    ticket_list_p.set_defaults(func=ticket_list)

    ticket_get_p = ticket_verbs.add_parser("get", help="Show a ticket", parents=[sub_common])
    ticket_get_p.add_argument("id", help="Ticket ID")
    ticket_get_p.set_defaults(func=ticket_get)

    ticket_add_p = ticket_verbs.add_parser("add", help="Create a ticket", parents=[sub_common])
    ticket_add_p.add_argument("title", help="Ticket title")
    ticket_add_p.add_argument("--requester", required=True, help="'Name <email>' or email")
    ticket_add_p.add_argument("--request-for", dest="request_for", help="'Name <email>' or email (default: requester)")
    ticket_add_p.add_argument("--description", default="", help="Ticket description")
    ticket_add_p.add_argument("--status", help="Status id (default: first status)")
    ticket_add_p.add_argument("--assignee", help="Assignee email")
    ticket_add_p.add_argument("--priority", default="none", choices=PRIORITIES, help="Priority")
    ticket_add_p.add_argument("--label", dest="labels", action="append", default=[], help="Label id (repeatable)")
    ticket_add_p.set_defaults(func=ticket_add)

    ticket_set_p = ticket_verbs.add_parser("set", help="Update ticket fields", parents=[sub_common])
    ticket_set_p.add_argument("id", help="Ticket ID")
    ticket_set_p.add_argument("--title", help="New title")
    ticket_set_p.add_argument("--description", help="New description")
    ticket_set_p.add_argument("--status", help="New status id")
    ticket_set_p.add_argument("--assignee", help="Assignee email, or 'none'")
    ticket_set_p.add_argument("--priority", choices=PRIORITIES, help="New priority")
    ticket_set_p.add_argument("--label", dest="labels", action="append", help="Label id (repeatable, replaces all)")
    ticket_set_p.set_defaults(func=ticket_set)

    ticket_move_p = ticket_verbs.add_parser("move", help="Move a ticket", parents=[sub_common])
    ticket_move_p.add_argument("id", help="Ticket ID")
    ticket_move_p.add_argument("--group", help="Target column id under the grouping mode")
    ticket_move_p.add_argument("--order", type=int, help="Position in column (0-indexed, default: end)")
    ticket_move_p.add_argument("--onto", help="Drop onto this ticket, taking its column and position")
    ticket_move_p.add_argument("--group-by", dest="group_by", choices=GROUP_BY_CHOICES, help="Grouping mode")
    ticket_move_p.set_defaults(func=ticket_move)

    ticket_delete_p = ticket_verbs.add_parser("delete", help="Delete a ticket", parents=[sub_common])
    ticket_delete_p.add_argument("id", help="Ticket ID")
    ticket_delete_p.set_defaults(func=ticket_delete)

    # ticket with no verb = list
    ticket_p.set_defaults(
        func=ticket_list,
        search="",
        status=None,
        labels=[],
        assignee=None,
        requester=None,
        request_for=None,
    )

    # --- status ---
    status_p = nouns.add_parser("status", help="Status operations", parents=[sub_common])
    status_verbs = status_p.add_subparsers(dest="verb")

    status_list_p = status_verbs.add_parser("list", help="List statuses", parents=[sub_common])
    status_list_p.set_defaults(func=status_list)

    status_move_p = status_verbs.add_parser("move", help="Move a status column", parents=[sub_common])
    status_move_p.add_argument("id", help="Status ID")
    status_move_p.add_argument("--position", type=int, required=True, help="New position (1-indexed)")
    status_move_p.set_defaults(func=status_move)

    status_p.set_defaults(func=status_list)

    # --- label ---
    label_p = nouns.add_parser("label", help="Label operations", parents=[sub_common])
    label_verbs = label_p.add_subparsers(dest="verb")

    label_list_p = label_verbs.add_parser("list", help="List labels", parents=[sub_common])
    label_list_p.set_defaults(func=label_list)

    label_add_p = label_verbs.add_parser("add", help="Create a label", parents=[sub_common])
    label_add_p.add_argument("name", help="Label name")
    label_add_p.add_argument("--color", help="Hex colour (default: derived from name)")
    label_add_p.set_defaults(func=label_add)

    label_p.set_defaults(func=label_list)

    # --- people ---
    assignee_p = nouns.add_parser("assignees", help="List the assignee roster", parents=[sub_common])
    assignee_p.set_defaults(func=assignee_list)

    requester_p = nouns.add_parser("requesters", help="List requesters seen on tickets", parents=[sub_common])
    requester_p.set_defaults(func=requester_list)

    return parser
