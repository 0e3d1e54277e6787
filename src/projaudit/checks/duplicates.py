import re
from enum import Enum
from typing import List, Pattern

from projaudit.config import MarkerConfig
from projaudit.types import Findings
from projaudit.walker import DirSnapshot


class MarkerKind(Enum):
    """Marker files whose duplication within one directory is reported."""
    README = "readme"
    GITIGNORE = "gitignore"

    @property
    def target(self) -> str:
        return {
            MarkerKind.README: "duplicated_readme_files",
            MarkerKind.GITIGNORE: "duplicated_gitignore_files",
        }[self]

    def pattern(self, config: MarkerConfig) -> Pattern[str]:
        raw = config.readme_pattern if self is MarkerKind.README else config.gitignore_pattern
        return re.compile(raw, re.IGNORECASE)


class DuplicateMarkerCheck:
    """Reports directories that hold more than one file of a marker kind.

    Matches are counted per directory only. A README in a parent and another
    in a child directory are independent and never flagged together.
    """

    def __init__(self, kind: MarkerKind, config: MarkerConfig = None):
        self.kind = kind
        self.target = kind.target
        self._pattern = kind.pattern(config or MarkerConfig())
        self._paths: List[str] = []

    def visit(self, snapshot: DirSnapshot) -> bool:
        matches = [snapshot.join(e.name) for e in snapshot.files() if self._pattern.fullmatch(e.name)]
        if len(matches) > 1:
            self._paths.extend(matches)
        return True

    def findings(self) -> Findings:
        return Findings(target=self.target, paths=tuple(self._paths))
