"""Tests for label colour hashing."""

from ticketboard.palette import LABEL_COLORS, color_for_label


def test_color_is_deterministic():
    assert color_for_label("bug") == color_for_label("bug")


def test_color_from_palette():
    for name in ("bug", "feature", "urgent", "docs"):
        assert color_for_label(name) in LABEL_COLORS
