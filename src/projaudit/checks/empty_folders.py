from typing import List

from projaudit.types import Findings
from projaudit.walker import DirSnapshot


class EmptyFolderCheck:
    """Records directories that have no entries at all.

    Only the raw entry count matters: a directory holding nothing but
    excluded subdirectories (say a lone ``node_modules``) is not empty.
    """

    target = "empty_folders"

    def __init__(self):
        self._paths: List[str] = []

    def visit(self, snapshot: DirSnapshot) -> bool:
        if not snapshot.entries:
            self._paths.append(snapshot.path)
            return False
        return True

    def findings(self) -> Findings:
        return Findings(target=self.target, paths=tuple(self._paths))
