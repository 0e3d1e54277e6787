"""Removal of empty folders found by an audit."""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from tqdm import tqdm

logger = logging.getLogger(__name__)


@dataclass
class CleanupReport:
    """Outcome of a deletion pass."""
    deleted: List[str] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)  # (path, error message)


def delete_empty_folders(paths: Sequence[str], progress: bool = False) -> CleanupReport:
    """Remove each folder in *paths* with ``os.rmdir``.

    Every removal is attempted independently; a failure is logged and the
    remaining folders are still processed. ``os.rmdir`` refuses non-empty
    directories, so a folder that gained content since the audit is kept.
    """
    report = CleanupReport()
    for folder in tqdm(paths, desc="Deleting", disable=not progress):
        try:
            os.rmdir(folder)
        except OSError as e:
            logger.error("Couldn't delete folder on path %s. Error: %s", folder, e.strerror or e)
            report.failed.append((folder, str(e.strerror or e)))
        else:
            report.deleted.append(folder)
    return report
