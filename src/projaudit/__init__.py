"""projaudit: a project hygiene auditor.

Walks a project folder and reports empty folders, an env template without
its env file, competing package-manager lock files, duplicated README or
.gitignore files and files with unstaged changes.
"""

__version__ = "0.1.0"

from projaudit.config import AuditConfig
from projaudit.types import AuditResults, Findings
from projaudit.auditor import ProjectAuditor, audit_project

__all__ = [
    "AuditConfig",
    "AuditResults",
    "Findings",
    "ProjectAuditor",
    "audit_project",
]
