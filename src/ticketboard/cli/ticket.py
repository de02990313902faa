"""Handlers for 'ticketboard ticket' commands."""

from dataclasses import replace

from ticketboard.cli._common import (
    error,
    filters_from_args,
    find_ticket_or_die,
    format_ticket_line,
    load_board_or_die,
    output_json,
    output_result,
    parse_person,
    save,
    ticket_to_json,
)
from ticketboard.filters import filter_tickets
from ticketboard.grouping import UnresolvedReferenceError, group_key_of
from ticketboard.ids import normalize_id
from ticketboard.models import PRIORITIES
from ticketboard.reorder import InvalidMoveError, group_members


def _resolve_labels(state, label_ids: list[str], json_mode: bool) -> tuple:
    known = {label.id: label for label in state.references.labels}
    missing = [lid for lid in label_ids if lid not in known]
    if missing:
        error(f"Unknown label(s): {', '.join(missing)}", json_mode)
    return tuple(known[lid] for lid in label_ids)


def _resolve_assignee(state, email: str | None, json_mode: bool):
    if not email or email == "none":
        return None
    for person in state.references.assignees:
        if person.email == email:
            return person
    error(f"Unknown assignee '{email}'", json_mode)


def _check_priority(priority: str, json_mode: bool) -> None:
    if priority not in PRIORITIES:
        error(f"Unknown priority '{priority}', expected one of: {', '.join(PRIORITIES)}", json_mode)


def ticket_list(args) -> int:
    """List tickets matching the filters."""
    _, state = load_board_or_die(args)
    tickets = filter_tickets(state.store.read(), filters_from_args(args))

    if args.json:
        output_json([ticket_to_json(t) for t in tickets])
    else:
        for t in tickets:
            print(f"{format_ticket_line(t)}  ({t.status})")

    return 0


def ticket_get(args) -> int:
    """Show one ticket."""
    args.id = normalize_id(args.id)
    _, state = load_board_or_die(args)
    ticket = find_ticket_or_die(state, args.id, args.json)

    if args.json:
        output_json(ticket_to_json(ticket))
    else:
        print(f"#{ticket.id} {ticket.title}")
        print(f"status:      {ticket.status}")
        print(f"priority:    {ticket.priority}")
        print(f"assignee:    {ticket.assignee.name if ticket.assignee else '-'}")
        print(f"requester:   {ticket.requester.name} <{ticket.requester.email}>")
        print(f"request for: {ticket.request_for.name} <{ticket.request_for.email}>")
        print(f"labels:      {', '.join(label.name for label in ticket.labels) or '-'}")
        print(f"created:     {ticket.created_at.isoformat()}")
        if ticket.description:
            print()
            print(ticket.description)

    return 0


def ticket_add(args) -> int:
    """Create a ticket at the end of its column."""
    board, state = load_board_or_die(args)

    statuses = state.references.statuses
    status = args.status or (statuses[0].id if statuses else "new")
    _check_priority(args.priority, args.json)
    known = list(state.references.assignees) + state.requesters()
    requester = parse_person(args.requester, known)
    request_for = parse_person(args.request_for, known) if args.request_for else None

    ticket = state.add_ticket(
        args.title,
        status,
        requester,
        request_for=request_for,
        description=args.description,
        assignee=_resolve_assignee(state, args.assignee, args.json),
        priority=args.priority,
        labels=_resolve_labels(state, args.labels, args.json),
    )
    save(board, state)

    output_result(
        {"id": ticket.id, "title": ticket.title, "status": ticket.status, "order": ticket.order},
        f"Created ticket {ticket.id} in {ticket.status}",
        args.json,
    )
    return 0


def ticket_set(args) -> int:
    """Update fields of a ticket."""
    args.id = normalize_id(args.id)
    board, state = load_board_or_die(args)
    ticket = find_ticket_or_die(state, args.id, args.json)

    changes = {}
    if args.title is not None:
        changes["title"] = args.title
    if args.description is not None:
        changes["description"] = args.description
    if args.status is not None:
        changes["status"] = args.status
    if args.priority is not None:
        _check_priority(args.priority, args.json)
        changes["priority"] = args.priority
    if args.assignee is not None:
        changes["assignee"] = _resolve_assignee(state, args.assignee, args.json)
    if args.labels is not None:
        changes["labels"] = _resolve_labels(state, args.labels, args.json)

    state.update_ticket(replace(ticket, **changes))
    save(board, state)

    output_result({"id": args.id, "changed": sorted(changes)}, f"Updated ticket {args.id}", args.json)
    return 0


def ticket_move(args) -> int:
    """Move a ticket to a column and position, or onto another ticket."""
    args.id = normalize_id(args.id)
    board, state = load_board_or_die(args)
    find_ticket_or_die(state, args.id, args.json)

    try:
        if args.onto:
            onto = normalize_id(args.onto)
            find_ticket_or_die(state, onto, args.json)
            state.drop_on(args.id, onto)
        else:
            if not args.group:
                error("Either --group or --onto is required", args.json)
            order = args.order
            if order is None:
                # Append to the end of the target column
                tickets = state.store.read()
                order = len(group_members(tickets, state.group_by, args.group))
            state.move(args.id, args.group, order)
    except (InvalidMoveError, UnresolvedReferenceError) as e:
        error(str(e), args.json)

    save(board, state)
    ticket = state.store.get(args.id)
    group = group_key_of(state.group_by, ticket)

    output_result(
        {"id": ticket.id, "group_by": state.group_by.value, "group": group, "order": ticket.order},
        f"Moved ticket {ticket.id} to {group} at position {ticket.order}",
        args.json,
    )
    return 0


def ticket_delete(args) -> int:
    """Delete a ticket."""
    args.id = normalize_id(args.id)
    board, state = load_board_or_die(args)
    find_ticket_or_die(state, args.id, args.json)

    state.delete_ticket(args.id)
    save(board, state)

    output_result({"id": args.id}, f"Deleted ticket {args.id}", args.json)
    return 0
