"""Handlers for 'ticketboard board' commands."""

from ticketboard.cli._common import (
    error,
    filters_from_args,
    format_ticket_line,
    load_board_or_die,
    output_json,
)
from ticketboard.projection import parse_sort_direction


def _parse_sorts(specs: list[str], json_mode: bool) -> dict:
    """Parse COLUMN=asc|desc|off options."""
    sorts = {}
    for spec in specs:
        column, sep, direction = spec.partition("=")
        if not sep or direction not in ("asc", "desc", "off"):
            error(f"Invalid sort '{spec}', expected COLUMN=asc|desc|off", json_mode)
        sorts[column] = parse_sort_direction(direction)
    return sorts


def board_show(args) -> int:
    """Show tickets grouped into columns."""
    _, state = load_board_or_die(args)
    state.filters = filters_from_args(args)
    state.column_sort = _parse_sorts(args.sort or [], args.json)

    grouped = state.grouped()
    columns = [c for c in state.columns() if grouped[c.id] or not args.hide_empty]

    if args.json:
        output_json(
            {
                "group_by": state.group_by.value,
                "columns": [
                    {
                        "id": c.id,
                        "name": c.name,
                        "tickets": [{"id": t.id, "title": t.title, "order": t.order} for t in grouped[c.id]],
                    }
                    for c in columns
                ],
            }
        )
    else:
        for c in columns:
            tickets = grouped[c.id]
            noun = "ticket" if len(tickets) == 1 else "tickets"
            print(f"{c.name} ({c.id})  {len(tickets)} {noun}")
            for t in tickets:
                print(format_ticket_line(t, indent="  "))

    return 0
