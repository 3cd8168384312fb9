"""Domain datatypes for size-annotated file trees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileEntry:
    """Regular file with its byte length."""

    name: str
    size: int


@dataclass(frozen=True)
class DirectoryEntry:
    """Directory whose ``size`` is the sum of its children's sizes.

    ``children`` is ordered ascending by size. Use ``from_children`` to build
    one so both invariants hold.
    """

    name: str
    size: int
    children: tuple["SizeTreeEntry", ...] = ()

    @classmethod
    def from_children(cls, name: str, entries: Iterable["SizeTreeEntry"]) -> "DirectoryEntry":
        """Aggregate ``entries`` into a complete, size-sorted directory."""
        ordered = sorted(entries, key=lambda entry: entry.size)
        return cls(name=name, size=sum(entry.size for entry in ordered), children=tuple(ordered))


SizeTreeEntry = DirectoryEntry | FileEntry


def entry_basename(path: Path | str) -> str:
    """Return the display name for ``path``; ``/`` and ``.`` keep their text."""
    candidate = Path(path)
    return candidate.name or str(candidate)


def iter_entries(entry: SizeTreeEntry, depth: int = 0) -> Iterator[tuple[SizeTreeEntry, int]]:
    """Yield ``(entry, depth)`` pairs in depth-first pre-order."""
    yield entry, depth
    if isinstance(entry, DirectoryEntry):
        for child in entry.children:
            yield from iter_entries(child, depth + 1)


__all__ = [
    "FileEntry",
    "DirectoryEntry",
    "SizeTreeEntry",
    "entry_basename",
    "iter_entries",
]
