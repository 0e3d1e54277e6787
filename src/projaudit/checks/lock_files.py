"""Package-manager lock file detection and conflict classification."""

import os
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from projaudit.config import LockFileConfig
from projaudit.types import Findings
from projaudit.walker import DirSnapshot


class LockFileVerdict(Enum):
    """How a set of lock files should be reported."""
    PASS = "pass"                  # fewer than two lock files
    HOMOGENEOUS = "homogeneous"    # several lock files, one manager (warning)
    HETEROGENEOUS = "heterogeneous"  # lock files of competing managers (error)


class LockFileCheck:
    """Collects every recognised lock file in the tree.

    Two lock files in one directory and two in different directories count
    the same; the check never stops descending.
    """

    target = "multiple_lock_files"

    def __init__(self, config: LockFileConfig = None):
        self.config = config or LockFileConfig()
        self._paths: List[str] = []

    def visit(self, snapshot: DirSnapshot) -> bool:
        for name in self.config.managers:
            if snapshot.has(name):
                self._paths.append(snapshot.join(name))
        return True

    def findings(self) -> Findings:
        return Findings(target=self.target, paths=tuple(self._paths))


def classify_lock_files(
    paths: Sequence[str],
    managers: Dict[str, str] = None,
) -> Tuple[LockFileVerdict, List[str]]:
    """Classify lock file findings by the package managers they belong to.

    Args:
        paths: Lock file paths as collected by :class:`LockFileCheck`
        managers: Lock file name to manager label table

    Returns:
        The verdict and the sorted manager labels that were found
    """
    if managers is None:
        managers = LockFileConfig().managers

    labels = sorted({managers[os.path.basename(p)] for p in paths if os.path.basename(p) in managers})
    if len(paths) < 2:
        return LockFileVerdict.PASS, labels
    if len(labels) > 1:
        return LockFileVerdict.HETEROGENEOUS, labels
    return LockFileVerdict.HOMOGENEOUS, labels
