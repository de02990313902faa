"""Tests for projecting tickets into columns."""

from ticketboard.grouping import NO_LABELS, UNASSIGNED, GroupBy, columns_of
from ticketboard.projection import SortDirection, parse_sort_direction, project, sort_by_priority

from .conftest import ALICE, BOB, STATUSES, _make_ticket


def _ids(grouped):
    return {key: [t.id for t in items] for key, items in grouped.items()}


def test_every_column_present_even_if_empty(tickets):
    grouped = project(tickets, GroupBy.STATUS, columns_of(GroupBy.STATUS, STATUSES, [], []))
    assert list(grouped) == ["new", "in-progress", "waiting-vendor", "done"]
    assert grouped["done"] == []


def test_orders_by_order_within_column():
    tickets = [_make_ticket("a", order=2), _make_ticket("b", order=0), _make_ticket("c", order=1)]
    grouped = project(tickets, GroupBy.STATUS, columns_of(GroupBy.STATUS, STATUSES, [], []))
    assert _ids(grouped)["new"] == ["b", "c", "a"]


def test_unknown_group_dropped():
    tickets = [_make_ticket("1", "archived"), _make_ticket("2", "new")]
    grouped = project(tickets, GroupBy.STATUS, columns_of(GroupBy.STATUS, STATUSES, [], []))
    assert sum(len(v) for v in grouped.values()) == 1


def test_assignee_projection(tickets, references):
    columns = columns_of(GroupBy.ASSIGNEE, [], references.assignees, [])
    grouped = _ids(project(tickets, GroupBy.ASSIGNEE, columns))
    assert grouped == {ALICE.email: ["1", "4"], BOB.email: ["2"], UNASSIGNED: ["5", "3"]}


def test_label_projection_uses_first_label(tickets, references):
    columns = columns_of(GroupBy.LABEL, [], [], references.labels)
    grouped = _ids(project(tickets, GroupBy.LABEL, columns))
    assert grouped == {"bug": ["1", "5"], "ui": ["2"], "docs": ["4"], NO_LABELS: ["3"]}


def test_priority_sort_per_column(tickets):
    columns = columns_of(GroupBy.STATUS, STATUSES, [], [])
    grouped = project(tickets, GroupBy.STATUS, columns, sort={"new": SortDirection.ASC})
    assert _ids(grouped)["new"] == ["3", "2", "1"]
    assert _ids(grouped)["in-progress"] == ["4", "5"]


def test_priority_sort_desc_from_string(tickets):
    columns = columns_of(GroupBy.STATUS, STATUSES, [], [])
    grouped = project(tickets, GroupBy.STATUS, columns, sort={"new": "desc"})
    assert _ids(grouped)["new"] == ["1", "2", "3"]


def test_priority_sort_does_not_touch_orders(tickets):
    columns = columns_of(GroupBy.STATUS, STATUSES, [], [])
    grouped = project(tickets, GroupBy.STATUS, columns, sort={"new": "asc"})
    assert [t.order for t in grouped["new"]] == [2, 1, 0]
    assert [t.order for t in tickets if t.status == "new"] == [0, 1, 2]


def test_sort_by_priority_is_stable():
    tickets = [
        _make_ticket("a", priority="low"),
        _make_ticket("b", priority="high"),
        _make_ticket("c", priority="low"),
        _make_ticket("d", priority="high"),
    ]
    assert [t.id for t in sort_by_priority(tickets, "asc")] == ["b", "d", "a", "c"]
    assert [t.id for t in sort_by_priority(tickets, "desc")] == ["a", "c", "b", "d"]


def test_sort_off_keeps_order():
    tickets = [_make_ticket("a", priority="low"), _make_ticket("b", priority="severe")]
    assert [t.id for t in sort_by_priority(tickets, "off")] == ["a", "b"]
    assert [t.id for t in sort_by_priority(tickets, None)] == ["a", "b"]


def test_parse_sort_direction():
    assert parse_sort_direction("asc") is SortDirection.ASC
    assert parse_sort_direction("off") is None
    assert parse_sort_direction(None) is None
