"""Audit pipeline: runs every hygiene check against one project root."""

import logging
import os
from typing import List, Optional

from projaudit.config import AuditConfig
from projaudit.checks import (
    DuplicateMarkerCheck,
    EmptyFolderCheck,
    EnvExampleCheck,
    LockFileCheck,
    MarkerKind,
    UnstagedFileCheck,
)
from projaudit.types import AuditResults
from projaudit.vcs import StatusQuery
from projaudit.walker import walk

logger = logging.getLogger(__name__)


class ProjectAuditor:
    """Runs the hygiene checks and merges their findings."""

    def __init__(
        self,
        config: Optional[AuditConfig] = None,
        status_query: Optional[StatusQuery] = None,
    ):
        """Initialize the auditor.

        Args:
            config: Audit configuration, defaults to :class:`AuditConfig`
            status_query: Version control collaborator; ``git`` when omitted
        """
        self.config = config or AuditConfig()
        self.status_query = status_query

    def _filesystem_checks(self) -> List:
        """Fresh visitor instances for one run."""
        return [
            EmptyFolderCheck(),
            EnvExampleCheck(self.config.env),
            LockFileCheck(self.config.lock_files),
            DuplicateMarkerCheck(MarkerKind.README, self.config.markers),
            DuplicateMarkerCheck(MarkerKind.GITIGNORE, self.config.markers),
        ]

    def audit(self, root: str) -> AuditResults:
        """Audit the project rooted at *root*.

        The filesystem checks share one walk of the tree; the unstaged file
        check runs afterwards against version control.

        Args:
            root: Project directory, relative paths are made absolute

        Returns:
            Freshly populated results for this run
        """
        root = os.path.abspath(root)
        results = AuditResults()

        checks = self._filesystem_checks()
        logger.debug("Auditing %s with %d filesystem checks", root, len(checks))
        walk(root, checks, self.config.traversal.excluded())
        for check in checks:
            results.merge(check.findings())

        unstaged = UnstagedFileCheck(self.status_query, self.config.vcs)
        results.merge(unstaged.run(root))

        return results


def audit_project(
    root: str,
    config: Optional[AuditConfig] = None,
    status_query: Optional[StatusQuery] = None,
) -> AuditResults:
    """Audit *root* and return the aggregated results."""
    return ProjectAuditor(config, status_query).audit(root)
