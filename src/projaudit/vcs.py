"""Version-control status query used by the unstaged file check."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from typing import List, Protocol


class VcsQueryError(RuntimeError):
    """Raised when the working tree status cannot be obtained."""


@dataclass(frozen=True)
class FileStatus:
    """One entry of ``git status --porcelain``.

    ``index`` and ``working_dir`` hold the single-character status codes of
    the staging area and the working tree (``M``, ``A``, ``D``, ``R``, ``?``...).
    """

    path: str
    index: str
    working_dir: str


class StatusQuery(Protocol):
    def query_status(self, root: str) -> List[FileStatus]:
        ...


def parse_porcelain(output: bytes) -> List[FileStatus]:
    """Parse raw ``git status --porcelain -z`` (v1) output.

    Records are NUL-terminated ``XY <path>`` entries. Renames and copies are
    followed by an extra record holding the original path, which is skipped.
    Paths are decoded like any other filesystem name (``os.fsdecode``), so
    names that are not valid UTF-8 survive.
    """
    statuses: List[FileStatus] = []
    records = iter(output.split(b"\0"))
    for record in records:
        if len(record) < 4:
            continue
        index, working_dir = record[0:1].decode("ascii"), record[1:2].decode("ascii")
        statuses.append(FileStatus(path=os.fsdecode(record[3:]), index=index, working_dir=working_dir))
        if index in "RC":
            next(records, None)
    return statuses


class GitStatusQuery:
    """Runs ``git status`` in the audited directory."""

    def __init__(self, executable: str = "git", timeout: float = 10.0):
        self.executable = executable
        self.timeout = timeout

    def query_status(self, root: str) -> List[FileStatus]:
        try:
            cp = subprocess.run(
                [self.executable, "status", "--porcelain", "-z"],
                cwd=root,
                capture_output=True,
                check=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise VcsQueryError(f"{self.executable} is not available: {e}") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode("utf-8", "replace").strip()
            raise VcsQueryError(stderr or f"{self.executable} status failed") from e
        except subprocess.TimeoutExpired as e:
            raise VcsQueryError(f"{self.executable} status timed out after {self.timeout}s") from e

        try:
            return parse_porcelain(cp.stdout)
        except UnicodeDecodeError as e:
            raise VcsQueryError(f"Unreadable {self.executable} status output: {e}") from e
