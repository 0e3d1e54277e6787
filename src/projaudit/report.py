"""Console rendering of audit results."""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import click

from projaudit.checks import LockFileVerdict, classify_lock_files
from projaudit.config import AuditConfig
from projaudit.types import AuditResults

ENV_HINT = "Consider committing a template .env or adding .env locally for dev."
CONFLICT_HINT = "Use only one package manager to avoid dependency resolution issues."
MONOREPO_HINT = (
    "If this is not a monorepo or intentional multi-package setup, consider using "
    "only one package manager (npm, yarn, pnpm, or bun)."
)


@dataclass
class CheckLine:
    """Pass/fail state of one check as shown in the report."""
    passed: bool
    success_message: str
    fail_message: str
    details: List[str] = field(default_factory=list)
    hints: List[str] = field(default_factory=list)


def _lock_file_hints(paths: List[str], config: AuditConfig) -> List[str]:
    verdict, labels = classify_lock_files(paths, config.lock_files.managers)
    if verdict is LockFileVerdict.HETEROGENEOUS:
        return [
            click.style("Conflicting lock file types detected: ", fg="red") + ", ".join(labels),
            click.style(CONFLICT_HINT, fg="bright_black"),
        ]
    if verdict is LockFileVerdict.HOMOGENEOUS:
        return [
            click.style("Multiple lock files of the same manager: ", fg="yellow") + ", ".join(labels),
            click.style(MONOREPO_HINT, fg="bright_black"),
        ]
    return []


def build_checks(results: AuditResults, config: Optional[AuditConfig] = None) -> List[CheckLine]:
    """Turn results into report lines, passed checks first."""
    config = config or AuditConfig()
    checks = [
        CheckLine(
            passed=not results.empty_folders,
            success_message="No empty folders",
            fail_message="Empty folders detected:",
            details=results.empty_folders,
        ),
        CheckLine(
            passed=not results.unused_env_example,
            success_message="No .env.example without .env",
            fail_message=".env.example found without .env file",
            hints=[click.style(ENV_HINT, fg="bright_black")],
        ),
        CheckLine(
            passed=len(results.multiple_lock_files) <= 1,
            success_message="No multiple lock files found",
            fail_message="Multiple lock files found:",
            details=results.multiple_lock_files,
            hints=_lock_file_hints(results.multiple_lock_files, config),
        ),
        CheckLine(
            passed=not results.duplicated_readme_files,
            success_message="No multiple README files",
            fail_message="Multiple README files detected:",
            details=results.duplicated_readme_files,
        ),
        CheckLine(
            passed=not results.duplicated_gitignore_files,
            success_message="No multiple .gitignore files",
            fail_message="Multiple .gitignore files detected:",
            details=results.duplicated_gitignore_files,
        ),
        CheckLine(
            passed=not results.unstaged_files,
            success_message="No files with unstaged changes",
            fail_message="Files with changes not staged:",
            details=results.unstaged_files,
        ),
    ]
    # sorted() is stable, so checks keep their order within each group
    return sorted(checks, key=lambda c: not c.passed)


def render_report(results: AuditResults, config: Optional[AuditConfig] = None) -> List[str]:
    """Render the report as a list of styled lines."""
    lines = [click.style("\nProject Audit Report:\n", fg="yellow", underline=True)]
    for check in build_checks(results, config):
        if check.passed:
            lines.append(click.style(f"✔  {check.success_message}", fg="green"))
            continue
        lines.append(click.style(f"⚠  {check.fail_message}", fg="red"))
        lines.extend(f"   - {detail}" for detail in check.details)
        lines.extend(check.hints)
    return lines


def print_report(
    results: AuditResults,
    config: Optional[AuditConfig] = None,
    echo: Callable[[str], None] = click.echo,
) -> None:
    """Print the report to the console."""
    for line in render_report(results, config):
        echo(line)
