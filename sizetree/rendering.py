"""Text rendering for size trees.

One line per entry in depth-first pre-order::

    | | -- name .....................................12.00 KB

Rendering is pure: it only reads an already-aggregated tree.
"""

from __future__ import annotations

from .size_tree.types import SizeTreeEntry, iter_entries

DEFAULT_LINE_WIDTH = 80
INDENT_UNIT = "| "
ENTRY_MARKER = "-- "

_KIB = 1024
_MIB = 1024 * 1024
_GIB = 1024 * 1024 * 1024


def format_size(size: int) -> str:
    """Return ``size`` bytes as ``B``/``KB``/``MB``/``GB`` with two decimals."""
    if size < _KIB:
        return f"{size:.2f} B"
    if size < _MIB:
        return f"{size / _KIB:.2f} KB"
    # Exactly 1 GiB still renders in MB.
    if size <= _GIB:
        return f"{size / _MIB:.2f} MB"
    return f"{size / _GIB:.2f} GB"


def padding_for(used_columns: int, width: int = DEFAULT_LINE_WIDTH) -> str:
    """Return a `` ....`` run for ``used_columns`` of indent, name and size text.

    The ``-- `` marker is not counted, so padded lines run three columns past
    ``width``. Returns ``""`` when there is no room.
    """
    remaining = width - used_columns
    if remaining <= 0:
        return ""
    return " " + "." * (remaining - 1)


def format_entry_line(name: str, size: int, depth: int, width: int = DEFAULT_LINE_WIDTH) -> str:
    """Render one tree row without its trailing newline."""
    indent = INDENT_UNIT * depth
    size_text = format_size(size)
    padding = padding_for(len(indent) + len(name) + len(size_text), width)
    return f"{indent}{ENTRY_MARKER}{name}{padding}{size_text}"


def render_tree(root: SizeTreeEntry, width: int = DEFAULT_LINE_WIDTH) -> str:
    """Render ``root`` and all descendants, one newline-terminated line each."""
    return "".join(
        format_entry_line(entry.name, entry.size, depth, width) + "\n"
        for entry, depth in iter_entries(root)
    )


__all__ = [
    "DEFAULT_LINE_WIDTH",
    "format_size",
    "padding_for",
    "format_entry_line",
    "render_tree",
]
