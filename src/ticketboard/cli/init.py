"""Handler for 'ticketboard init'."""

from datetime import datetime, timezone

from ticketboard.cli._common import board_path, output_json
from ticketboard.model.reference import add_label
from ticketboard.model.ticket import create_ticket
from ticketboard.models import Board, ReferenceData, Requester, Status
from ticketboard.writer import save_board

STATUSES = [
    ("new", "New", "#2563eb"),
    ("in-progress", "In Progress", "#f97316"),
    ("waiting-vendor", "Waiting for Vendor", "#d97706"),
    ("waiting-requester", "Waiting for Requester", "#f59e0b"),
    ("done", "Done", "#059669"),
]

LABELS = [
    ("IT", "#3b82f6"),
    ("HR", "#10b981"),
    ("Finance", "#f59e0b"),
    ("Design", "#ec4899"),
    ("Engineering", "#8b5cf6"),
    ("Operations", "#ef4444"),
    ("Hardware", "#06b6d4"),
    ("Software", "#6366f1"),
]

ASSIGNEES = [
    Requester("Alex Thompson", "alex.thompson@company.com"),
    Requester("David Kim", "david.kim@company.com"),
    Requester("Lisa Anderson", "lisa.anderson@company.com"),
    Requester("Ryan Martinez", "ryan.martinez@company.com"),
]

# (title, description, status, requester, assignee index, priority, label ids)
TICKETS = [
    (
        "Password reset for accounting system",
        "Need to reset password for QuickBooks access",
        "new",
        Requester("Sarah Chen", "sarah.chen@company.com"),
        0,
        "high",
        ["it", "finance"],
    ),
    (
        "New laptop for onboarding",
        "Incoming designer starts Monday",
        "in-progress",
        Requester("Maria Garcia", "maria.garcia@company.com"),
        1,
        "medium",
        ["hardware", "hr"],
    ),
    (
        "VPN drops every hour",
        "Remote staff lose connection on the hour",
        "waiting-vendor",
        Requester("James Wilson", "james.wilson@company.com"),
        2,
        "severe",
        ["it"],
    ),
    (
        "Design tool licence renewal",
        "",
        "waiting-requester",
        Requester("Emily Brown", "emily.brown@company.com"),
        None,
        "low",
        ["design", "software"],
    ),
    (
        "Archive last year's expense reports",
        "",
        "done",
        Requester("Sarah Chen", "sarah.chen@company.com"),
        3,
        "none",
        [],
    ),
]


def sample_board(path: str = "") -> Board:
    """Build the sample board written by init."""
    statuses = tuple(Status(id=sid, name=name, color=color, order=i) for i, (sid, name, color) in enumerate(STATUSES))
    labels: list = []
    for name, color in LABELS:
        labels, _ = add_label(labels, name, color)
    references = ReferenceData(statuses=statuses, assignees=tuple(ASSIGNEES), labels=tuple(labels))

    by_id = {label.id: label for label in labels}
    now = datetime.now(timezone.utc)
    tickets: list = []
    for title, description, status, requester, assignee, priority, label_ids in TICKETS:
        tickets, _ = create_ticket(
            tickets,
            title,
            status,
            requester,
            description=description,
            assignee=ASSIGNEES[assignee] if assignee is not None else None,
            priority=priority,
            labels=[by_id[lid] for lid in label_ids],
            now=now,
        )
    return Board(path=path, references=references, tickets=tickets, settings={"group_by": "status"})


def init_board(args) -> int:
    """Write a sample board file unless one already exists."""
    path = board_path(args)

    if path.exists() and not args.force:
        if args.json:
            output_json({"path": str(path), "created": False})
        else:
            print(f"Board already initialized at {path}")
        return 0

    board = sample_board(str(path))
    save_board(board)

    if args.json:
        output_json({"path": str(path), "created": True, "tickets": len(board.tickets)})
    else:
        print(f"Initialized board at {path}")
        print(f"Statuses: {', '.join(s.name for s in board.references.statuses)}")

    return 0
