"""Shared fixtures for CLI tests."""

from argparse import Namespace

import pytest

from ticketboard.cli.init import sample_board
from ticketboard.writer import save_board


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep TICKETBOARD_* variables from the caller's shell out of the tests."""
    for name in ("TICKETBOARD_BOARD_FILE", "TICKETBOARD_GROUP_BY", "TICKETBOARD_STRICT_REFERENCES"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def board_file(tmp_path):
    """A sample board: five statuses with one ticket each, ids 1 to 5."""
    path = tmp_path / "tickets.yaml"
    save_board(sample_board(str(path)))
    return path


def _args(board_file, **kwargs):
    """Namespace with the common flags set."""
    kwargs.setdefault("json", False)
    kwargs.setdefault("verbose", False)
    return Namespace(board=str(board_file), **kwargs)


def _filters(**kwargs):
    """Default filter arguments, overridden by kwargs."""
    values = dict(search="", status=None, labels=[], assignee=None, requester=None, request_for=None)
    values.update(kwargs)
    return values
