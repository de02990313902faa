"""Handlers for 'ticketboard assignee' and 'ticketboard requester' commands."""

from ticketboard.cli._common import load_board_or_die, output_json


def _print_people(people, json_mode: bool) -> None:
    if json_mode:
        output_json([{"name": p.name, "email": p.email} for p in people])
    else:
        for p in people:
            print(f"{p.name} <{p.email}>")


def assignee_list(args) -> int:
    """List the assignee roster."""
    _, state = load_board_or_die(args)
    _print_people(state.references.assignees, args.json)
    return 0


def requester_list(args) -> int:
    """List requesters seen across all tickets."""
    _, state = load_board_or_die(args)
    _print_people(state.requesters(), args.json)
    return 0
