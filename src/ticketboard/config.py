"""Configuration: defaults, board-file settings and environment overrides."""

import os
from typing import Any

ENV_PREFIX = "TICKETBOARD_"

DEFAULTS: dict[str, Any] = {
    "board_file": "tickets.yaml",
    "group_by": "status",
    "strict_references": False,
    "log_level": "WARNING",
}


def _python_key(key: str) -> str:
    """Convert a hyphenated or upper-case key to Python style."""
    return key.strip().lower().replace("-", "_")


def _coerce(key: str, raw: Any) -> Any:
    """Type-coerce a setting using the type of its default."""
    default = DEFAULTS.get(key)
    if default is None or not isinstance(raw, str):
        return raw
    if isinstance(default, bool):
        return raw.strip().lower() in ("true", "yes", "1")
    if isinstance(default, int):
        return int(raw)
    return raw


def load_config(settings: dict | None = None, environ: dict | None = None) -> dict[str, Any]:
    """Merge defaults, board settings and TICKETBOARD_* environment variables.

    Later sources win. Unknown keys from the board file are kept.
    """
    environ = os.environ if environ is None else environ
    config = dict(DEFAULTS)
    for key, value in (settings or {}).items():
        py_key = _python_key(key)
        config[py_key] = _coerce(py_key, value)
    for name, value in environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        py_key = _python_key(name[len(ENV_PREFIX) :])
        if py_key in DEFAULTS:
            config[py_key] = _coerce(py_key, value)
    return config
