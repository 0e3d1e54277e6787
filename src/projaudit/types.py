from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class Findings:
    """Immutable partial result produced by a single check.

    ``target`` names the :class:`AuditResults` field the findings feed.
    """

    target: str
    paths: Tuple[str, ...] = ()
    flag: bool = False


@dataclass
class AuditResults:
    """Aggregate of every check for one audit run."""

    empty_folders: List[str] = field(default_factory=list)
    unused_env_example: bool = False
    multiple_lock_files: List[str] = field(default_factory=list)
    duplicated_readme_files: List[str] = field(default_factory=list)
    duplicated_gitignore_files: List[str] = field(default_factory=list)
    unused_files: List[str] = field(default_factory=list)
    unstaged_files: List[str] = field(default_factory=list)

    def merge(self, findings: Findings) -> None:
        """Fold a check's findings into the aggregate."""
        current = getattr(self, findings.target)
        if isinstance(current, bool):
            setattr(self, findings.target, current or findings.flag)
        else:
            current.extend(findings.paths)

    def has_findings(self) -> bool:
        """True when at least one check failed.

        A single lock file is normal, so lock files only count from two on.
        """
        return bool(
            self.empty_folders
            or self.unused_env_example
            or len(self.multiple_lock_files) > 1
            or self.duplicated_readme_files
            or self.duplicated_gitignore_files
            or self.unused_files
            or self.unstaged_files
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert results to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuditResults":
        """Create results from a dictionary, ignoring extras."""
        field_names = {f.name for f in fields(cls)}
        cleaned = {k: v for k, v in data.items() if k in field_names}
        return cls(**cleaned)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
