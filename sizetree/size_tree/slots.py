"""Index-addressed result buffer shared between a walk and its subwalks.

A walk reserves one slot per subdirectory before any subwalk starts. Each
subwalk owns exactly one index and writes it once, so concurrent writers
never touch the same position and no lock is needed. The owning walk reads
the buffer only after every subwalk has been joined.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .types import SizeTreeEntry


@dataclass(frozen=True)
class WalkTask:
    """Deferred walk of one subdirectory into a reserved slot."""

    name: str
    path: Path
    slot_index: int


class SlotBuffer:
    """Sequence of optional entries; reserved slots are filled exactly once.

    ``append`` and ``reserve`` belong to the owning walk and must finish
    before any writer starts. ``fill`` is the only call made from workers,
    and it touches nothing but the caller's own index.
    """

    def __init__(self) -> None:
        self._slots: list[SizeTreeEntry | None] = []
        self._reserved: list[bool] = []

    def __len__(self) -> int:
        return len(self._slots)

    @property
    def pending_count(self) -> int:
        return sum(1 for reserved, entry in zip(self._reserved, self._slots) if reserved and entry is None)

    def append(self, entry: SizeTreeEntry) -> int:
        """Store an already-complete entry and return its index."""
        self._slots.append(entry)
        self._reserved.append(False)
        return len(self._slots) - 1

    def reserve(self) -> int:
        """Append an empty slot and return its index for exactly one writer."""
        self._slots.append(None)
        self._reserved.append(True)
        return len(self._slots) - 1

    def fill(self, index: int, entry: SizeTreeEntry) -> None:
        """Write ``entry`` into reserved slot ``index``."""
        if not 0 <= index < len(self._slots) or not self._reserved[index]:
            raise ValueError(f"slot {index} was never reserved")
        if self._slots[index] is not None:
            raise ValueError(f"slot {index} is already filled")
        self._slots[index] = entry

    def drain(self) -> list[SizeTreeEntry]:
        """Return all entries in index order and empty the buffer."""
        pending = self.pending_count
        if pending:
            raise RuntimeError(f"{pending} slot(s) still pending")
        drained = [entry for entry in self._slots if entry is not None]
        self._slots = []
        self._reserved = []
        return drained


__all__ = [
    "SlotBuffer",
    "WalkTask",
]
