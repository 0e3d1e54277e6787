#!/usr/bin/env python3
"""Hygiene audit of this repository used by CI Gatekeeper."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Dict

from projaudit import AuditResults, audit_project


def collect_evidence(results: AuditResults) -> Dict[str, int]:
    """Count findings per check."""
    return {
        "empty_folders": len(results.empty_folders),
        "unused_env_example": int(results.unused_env_example),
        "lock_files": len(results.multiple_lock_files),
        "duplicated_readme_files": len(results.duplicated_readme_files),
        "duplicated_gitignore_files": len(results.duplicated_gitignore_files),
        "unstaged_files": len(results.unstaged_files),
    }


def score(evidence: Dict[str, int]) -> int:
    """Compute a naive rubric score out of 100."""
    base = 100
    if evidence.get("empty_folders"):
        base -= 10
    if evidence.get("unused_env_example"):
        base -= 15
    if evidence.get("lock_files", 0) > 1:
        base -= 25
    if evidence.get("duplicated_readme_files") or evidence.get("duplicated_gitignore_files"):
        base -= 25
    if evidence.get("unstaged_files"):
        base -= 25
    return base


def main() -> None:
    repo = Path(__file__).resolve().parent.parent
    evidence = collect_evidence(audit_project(str(repo)))
    result = {"evidence": evidence, "score": score(evidence)}
    json.dump(result, sys.stdout, indent=2)


if __name__ == "__main__":  # pragma: no cover - script entry
    main()
