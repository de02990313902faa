"""Handlers for 'ticketboard status' commands."""

from ticketboard.cli._common import error, load_board_or_die, output_json, output_result, save


def status_list(args) -> int:
    """List statuses in column order with ticket counts."""
    _, state = load_board_or_die(args)
    tickets = state.store.read()

    items = [
        {
            "id": s.id,
            "name": s.name,
            "color": s.color,
            "order": s.order,
            "tickets": sum(1 for t in tickets if t.status == s.id),
        }
        for s in state.references.statuses
    ]

    if args.json:
        output_json(items)
    else:
        for s in items:
            noun = "ticket" if s["tickets"] == 1 else "tickets"
            print(f"{s['id']:<20} {s['name']:<24} {s['tickets']} {noun}")

    return 0


def status_move(args) -> int:
    """Move a status column to a new position (1-indexed)."""
    board, state = load_board_or_die(args)
    ids = [s.id for s in state.references.statuses]
    if args.id not in ids:
        error(f"Status '{args.id}' not found. Available: {', '.join(ids)}", args.json)
    if not 1 <= args.position <= len(ids):
        error(f"Position must be between 1 and {len(ids)}", args.json)

    state.reorder_statuses(ids.index(args.id), args.position - 1)
    save(board, state)

    order = [s.id for s in state.references.statuses]
    output_result({"id": args.id, "statuses": order}, f"Moved status {args.id}: {', '.join(order)}", args.json)
    return 0
