"""Tests for 'ticketboard init'."""

import json

from ticketboard.cli.init import init_board
from ticketboard.loader import load_board

from .conftest import _args


def test_init_creates_board(tmp_path, capsys):
    path = tmp_path / "tickets.yaml"
    assert init_board(_args(path, force=False)) == 0

    assert "Initialized board" in capsys.readouterr().out
    board = load_board(path)
    assert len(board.references.statuses) == 5
    assert [t.id for t in board.tickets] == ["1", "2", "3", "4", "5"]
    assert all(t.order == 0 for t in board.tickets)


def test_init_existing_board_untouched(board_file, capsys):
    board_file.write_text("tickets: []\n")
    assert init_board(_args(board_file, force=False)) == 0

    assert "already initialized" in capsys.readouterr().out
    assert board_file.read_text() == "tickets: []\n"


def test_init_force_overwrites(board_file, capsys):
    board_file.write_text("tickets: []\n")
    assert init_board(_args(board_file, force=True, json=True)) == 0

    data = json.loads(capsys.readouterr().out)
    assert data == {"path": str(board_file.resolve()), "created": True, "tickets": 5}
    assert len(load_board(board_file).tickets) == 5
