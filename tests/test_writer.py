"""Tests for saving board files."""

import yaml

from ticketboard.loader import load_board
from ticketboard.models import Board, ReferenceData
from ticketboard.writer import board_to_dict, save_board, ticket_to_dict

from .conftest import ALICE, BUG, STATUSES, UI, _make_ticket


def _board(path=""):
    return Board(
        path=str(path),
        references=ReferenceData(statuses=STATUSES, assignees=(ALICE,), labels=(BUG, UI)),
        tickets=[
            _make_ticket("1", assignee=ALICE, labels=[UI, BUG], priority="high", description="Broken"),
            _make_ticket("2", "done", 0),
        ],
        settings={"group_by": "label"},
    )


def test_ticket_stored_by_reference():
    data = ticket_to_dict(_board().tickets[0])
    assert data["assignee"] == ALICE.email
    assert data["labels"] == ["ui", "bug"]
    assert data["description"] == "Broken"


def test_empty_description_omitted():
    assert "description" not in ticket_to_dict(_board().tickets[1])


def test_board_sections_in_order():
    assert list(board_to_dict(_board())) == ["settings", "statuses", "labels", "assignees", "tickets"]


def test_save_then_load(tmp_path):
    path = tmp_path / "tickets.yaml"
    board = _board(path)
    save_board(board)

    loaded = load_board(path)
    assert loaded.tickets == board.tickets
    assert loaded.references == board.references
    assert loaded.settings == board.settings


def test_save_leaves_no_temp_files(tmp_path):
    path = tmp_path / "tickets.yaml"
    save_board(_board(), path)
    assert [p.name for p in tmp_path.iterdir()] == ["tickets.yaml"]
    assert yaml.safe_load(path.read_text())["tickets"][0]["id"] == "1"
