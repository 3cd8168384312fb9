"""Filesystem access used by the size walker.

The walker only needs two primitives: list a directory's children with their
kind, and read a file's byte length. ``LocalFileSystem`` provides both over
``os.scandir`` and ``os.open``/``os.fstat`` and never follows symbolic links.
"""

from __future__ import annotations

import enum
import errno
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

_O_NOFOLLOW = getattr(os, "O_NOFOLLOW", 0)


class ChildKind(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class DirectoryChild:
    """One directory child as seen by the walker."""

    name: str
    kind: ChildKind


class FileSystem(Protocol):
    def list_children(self, directory: Path) -> list[DirectoryChild]: ...

    def file_size(self, path: Path) -> int: ...


def classify_dir_entry(entry: os.DirEntry[str]) -> ChildKind:
    """Map a scandir entry to its kind; symlinks are ``OTHER``."""
    if entry.is_symlink():
        return ChildKind.OTHER
    if entry.is_dir(follow_symlinks=False):
        return ChildKind.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return ChildKind.FILE
    return ChildKind.OTHER


class LocalFileSystem:
    """Local disk access; ``OSError`` from the OS propagates unchanged."""

    def list_children(self, directory: Path) -> list[DirectoryChild]:
        # scandir follows a symlinked directory itself; refuse it like O_NOFOLLOW.
        if os.path.islink(directory):
            raise OSError(errno.ELOOP, os.strerror(errno.ELOOP), str(directory))
        with os.scandir(directory) as entries:
            return [DirectoryChild(name=entry.name, kind=classify_dir_entry(entry)) for entry in entries]

    def file_size(self, path: Path) -> int:
        """Open ``path`` read-only and return its length; unreadable files fail."""
        fd = os.open(path, os.O_RDONLY | _O_NOFOLLOW)
        try:
            return int(os.fstat(fd).st_size)
        finally:
            os.close(fd)


__all__ = [
    "ChildKind",
    "DirectoryChild",
    "FileSystem",
    "LocalFileSystem",
    "classify_dir_entry",
]
