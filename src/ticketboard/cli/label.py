"""Handlers for 'ticketboard label' commands."""

from ticketboard.cli._common import load_board_or_die, output_json, output_result, save


def label_list(args) -> int:
    """List labels with ticket counts."""
    _, state = load_board_or_die(args)
    tickets = state.store.read()

    items = [
        {
            "id": label.id,
            "name": label.name,
            "color": label.color,
            "tickets": sum(1 for t in tickets if any(lb.id == label.id for lb in t.labels)),
        }
        for label in state.references.labels
    ]

    if args.json:
        output_json(items)
    else:
        for lb in items:
            print(f"{lb['id']:<16} {lb['name']:<16} {lb['color']}  {lb['tickets']}")

    return 0


def label_add(args) -> int:
    """Add a label. The id is derived from the name."""
    board, state = load_board_or_die(args)
    existing = {label.id for label in state.references.labels}

    label = state.add_label(args.name, args.color)
    created = label.id not in existing
    if created:
        save(board, state)

    text = f"Created label {label.id}" if created else f"Label {label.id} already exists"
    output_result({"id": label.id, "name": label.name, "color": label.color, "created": created}, text, args.json)
    return 0
