"""Persistent JSON config helpers.

Reads the default worker count and rendered line width.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

CONFIG_PATH = Path.home() / ".config" / "sizetree.json"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _load_positive_int(key: str) -> int | None:
    """Read a positive integer value; booleans and other types are ignored."""
    value = load_config().get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def load_workers() -> int | None:
    """Return the persisted default worker count, if valid."""
    return _load_positive_int("workers")


def load_line_width() -> int | None:
    """Return the persisted rendered line width, if valid."""
    return _load_positive_int("line_width")
