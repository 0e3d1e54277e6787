"""Single-pass directory traversal shared by the filesystem checks."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Iterable, List, Protocol, Sequence, Tuple

logger = logging.getLogger(__name__)


class EntryKind(Enum):
    """Kind of a directory entry as reported by the filesystem listing."""
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"  # symlinks, sockets, devices


@dataclass(frozen=True)
class DirEntry:
    name: str
    kind: EntryKind


@dataclass(frozen=True)
class DirSnapshot:
    """A directory path and its immediate entries at the time it was read."""
    path: str
    entries: Tuple[DirEntry, ...]

    def files(self) -> List[DirEntry]:
        return [e for e in self.entries if e.kind is EntryKind.FILE]

    def directories(self) -> List[DirEntry]:
        return [e for e in self.entries if e.kind is EntryKind.DIRECTORY]

    def has(self, name: str) -> bool:
        return any(e.name == name for e in self.entries)

    def join(self, name: str) -> str:
        return os.path.join(self.path, name)


class Visitor(Protocol):
    def visit(self, snapshot: DirSnapshot) -> bool:
        """Inspect one directory; return True to keep descending below it."""
        ...


def _kind_of(entry: os.DirEntry) -> EntryKind:
    # Links are not followed, matching the listing's own type information.
    if entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER


def scan_dir(path: str) -> DirSnapshot:
    """Read the immediate entries of *path*.

    Raises:
        OSError: if the directory cannot be listed.
    """
    with os.scandir(path) as it:
        entries = tuple(DirEntry(name=e.name, kind=_kind_of(e)) for e in it)
    return DirSnapshot(path=path, entries=entries)


def walk(
    root: str,
    visitors: Sequence[Visitor],
    exclude_dirs: AbstractSet[str] = frozenset(),
) -> None:
    """Depth-first, pre-order walk of *root* feeding each directory to *visitors*.

    Every visitor sees a directory before its children. A visitor that returns
    False for a directory is dropped for that directory's subtree only; the
    walk stops descending once no visitor remains. Child directories whose
    lowercase name is in *exclude_dirs* are never entered.

    A directory that cannot be listed is logged and skipped together with its
    subtree; the rest of the walk continues.
    """
    if not visitors:
        return
    excluded = frozenset(name.lower() for name in exclude_dirs)
    stack: List[Tuple[str, List[Visitor]]] = [(os.path.abspath(root), list(visitors))]

    while stack:
        path, active = stack.pop()
        try:
            snapshot = scan_dir(path)
        except OSError as e:
            logger.warning("Skipping unreadable directory %s: %s", path, e)
            continue

        descending = [v for v in active if v.visit(snapshot)]
        if not descending:
            continue

        # reversed so children pop in listing order
        for child in reversed(list(_child_dirs(snapshot, excluded))):
            stack.append((child, descending))


def _child_dirs(snapshot: DirSnapshot, excluded: AbstractSet[str]) -> Iterable[str]:
    for entry in snapshot.directories():
        if entry.name.lower() not in excluded:
            yield snapshot.join(entry.name)
