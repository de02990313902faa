"""Label colour palette and deterministic colour hashing."""

import hashlib

# Colours used by the sample board's labels, followed by extra distinct
# shades so hashed colours spread evenly.
LABEL_COLORS: list[str] = [
    "#3b82f6",  # blue
    "#10b981",  # green
    "#f59e0b",  # amber
    "#ec4899",  # pink
    "#8b5cf6",  # purple
    "#ef4444",  # red
    "#06b6d4",  # cyan
    "#6366f1",  # indigo
    "#2e8b57",  # sea green
    "#dd6600",  # orange
    "#886644",  # brown
    "#808080",  # grey
    "#668800",  # olive green
    "#448888",  # dark cyan
    "#aa66cc",  # medium purple
    "#cc8800",  # dark amber
]


def color_for_label(name: str) -> str:
    """Deterministic hex colour from a label name.

    Uses the sum of all md5 bytes mod palette size.
    """
    h = hashlib.md5(name.encode()).hexdigest()
    index = sum(int(h[i : i + 2], 16) for i in range(0, 32, 2))
    return LABEL_COLORS[index % len(LABEL_COLORS)]
