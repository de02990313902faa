"""Tests for 'ticketboard status' commands."""

import json

import pytest

from ticketboard.cli.status import status_list, status_move
from ticketboard.loader import load_board

from .conftest import _args


def test_status_list(board_file, capsys):
    assert status_list(_args(board_file)) == 0

    out = capsys.readouterr().out
    assert "waiting-requester" in out
    assert "1 ticket" in out


def test_status_list_json(board_file, capsys):
    assert status_list(_args(board_file, json=True)) == 0

    data = json.loads(capsys.readouterr().out)
    assert [s["id"] for s in data] == ["new", "in-progress", "waiting-vendor", "waiting-requester", "done"]
    assert data[0] == {"id": "new", "name": "New", "color": "#2563eb", "order": 0, "tickets": 1}


def test_status_move(board_file, capsys):
    assert status_move(_args(board_file, id="done", position=1)) == 0

    assert "Moved status done" in capsys.readouterr().out
    statuses = load_board(board_file).references.statuses
    assert [s.id for s in statuses][:2] == ["done", "new"]
    assert [s.order for s in statuses] == [0, 1, 2, 3, 4]


def test_status_move_unknown(board_file, capsys):
    with pytest.raises(SystemExit):
        status_move(_args(board_file, id="archived", position=1))
    assert "Status 'archived' not found" in capsys.readouterr().err


def test_status_move_bad_position(board_file, capsys):
    with pytest.raises(SystemExit):
        status_move(_args(board_file, id="new", position=9))
    assert "between 1 and 5" in capsys.readouterr().err
