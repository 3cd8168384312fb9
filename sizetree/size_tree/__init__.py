"""Size-annotated filesystem tree model.

This package contains the non-rendering pieces:
- file/directory entry datatypes with aggregated sizes
- the filesystem access used by the walker
- the slot buffer that collects concurrent subwalk results
- the shared bounded scheduler and the recursive walker
"""

from __future__ import annotations

from .types import DirectoryEntry, FileEntry, SizeTreeEntry, entry_basename, iter_entries
from .fs import ChildKind, DirectoryChild, FileSystem, LocalFileSystem, classify_dir_entry
from .slots import SlotBuffer, WalkTask
from .scheduler import DEFAULT_MAX_WORKERS, WalkScheduler
from .walk import build_size_tree, walk_directory

__all__ = [
    "DirectoryEntry",
    "FileEntry",
    "SizeTreeEntry",
    "entry_basename",
    "iter_entries",
    "ChildKind",
    "DirectoryChild",
    "FileSystem",
    "LocalFileSystem",
    "classify_dir_entry",
    "SlotBuffer",
    "WalkTask",
    "DEFAULT_MAX_WORKERS",
    "WalkScheduler",
    "build_size_tree",
    "walk_directory",
]
