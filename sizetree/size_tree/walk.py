"""Recursive, concurrent size walk producing a ``DirectoryEntry`` tree."""

from __future__ import annotations

import logging
from pathlib import Path

from .fs import ChildKind, FileSystem, LocalFileSystem
from .scheduler import DEFAULT_MAX_WORKERS, WalkScheduler
from .slots import SlotBuffer, WalkTask
from .types import DirectoryEntry, FileEntry, entry_basename

logger = logging.getLogger(__name__)


def walk_directory(
    directory: Path,
    scheduler: WalkScheduler,
    fs: FileSystem,
    name: str | None = None,
) -> DirectoryEntry:
    """Walk ``directory`` and return its aggregated, size-sorted entry.

    Files are sized inline. Each subdirectory gets a reserved slot and is
    walked through ``scheduler``; the buffer is drained only after the
    scheduler has joined every subwalk. Filesystem errors propagate and no
    partial entry is produced.
    """
    buffer = SlotBuffer()
    tasks: list[WalkTask] = []

    for child in fs.list_children(directory):
        child_path = directory / child.name
        if child.kind is ChildKind.FILE:
            buffer.append(FileEntry(name=child.name, size=fs.file_size(child_path)))
        elif child.kind is ChildKind.DIRECTORY:
            tasks.append(WalkTask(name=child.name, path=child_path, slot_index=buffer.reserve()))

    def run_task(task: WalkTask) -> None:
        buffer.fill(task.slot_index, walk_directory(task.path, scheduler, fs, name=task.name))

    if tasks:
        scheduler.run(tasks, run_task)

    entry = DirectoryEntry.from_children(
        name if name is not None else entry_basename(directory),
        buffer.drain(),
    )
    logger.debug("walked %s: %d entries, %d bytes", directory, len(entry.children), entry.size)
    return entry


def build_size_tree(
    root: Path | str,
    *,
    max_workers: int = DEFAULT_MAX_WORKERS,
    fs: FileSystem | None = None,
) -> DirectoryEntry:
    """Build the complete size tree for ``root``.

    The root itself is walked as a single reserved slot on the calling
    thread; ``max_workers`` bounds concurrent walkers across the whole tree.
    """
    root_path = Path(root)
    filesystem = fs if fs is not None else LocalFileSystem()
    buffer = SlotBuffer()
    task = WalkTask(name=entry_basename(root_path), path=root_path, slot_index=buffer.reserve())

    with WalkScheduler(max_workers) as scheduler:
        buffer.fill(task.slot_index, walk_directory(task.path, scheduler, filesystem, name=task.name))

    (root_entry,) = buffer.drain()
    assert isinstance(root_entry, DirectoryEntry)
    return root_entry


__all__ = [
    "walk_directory",
    "build_size_tree",
]
