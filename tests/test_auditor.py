"""Tests for the audit pipeline."""

import shutil
import subprocess

import pytest

from projaudit import AuditResults, audit_project
from projaudit.auditor import ProjectAuditor
from projaudit.config import AuditConfig
from projaudit.vcs import FileStatus, VcsQueryError


def _normalised(results: AuditResults) -> dict:
    return {k: sorted(v) if isinstance(v, list) else v for k, v in results.to_dict().items()}


def test_fresh_results_are_empty():
    results = AuditResults()
    assert results.empty_folders == []
    assert results.unused_env_example is False
    assert results.unused_files == []
    assert not results.has_findings()


def test_sample_project(sample_project, fake_status):
    root = sample_project
    status = fake_status([FileStatus("src/app.ts", " ", "M"), FileStatus("new.ts", "A", " ")])
    results = audit_project(str(root), status_query=status)

    assert results.empty_folders == [str(root / "docs")]
    assert results.unused_env_example is True
    assert set(results.multiple_lock_files) == {
        str(root / "package-lock.json"), str(root / "web" / "yarn.lock"),
    }
    assert set(results.duplicated_readme_files) == {str(root / "README.md"), str(root / "README")}
    assert results.duplicated_gitignore_files == []
    assert results.unused_files == []
    assert results.unstaged_files == ["src/app.ts"]
    assert results.has_findings()


def test_clean_project_has_no_findings(make_tree, fake_status):
    root = make_tree({
        "README.md": "",
        ".gitignore": "",
        ".env.example": "",
        ".env": "",
        "package-lock.json": "{}",
        "src": {"index.js": ""},
    })
    results = audit_project(str(root), status_query=fake_status())
    assert results == AuditResults(multiple_lock_files=[str(root / "package-lock.json")])
    assert not results.has_findings()


def test_audit_is_idempotent(sample_project, fake_status):
    auditor = ProjectAuditor(status_query=fake_status())
    first = auditor.audit(str(sample_project))
    second = auditor.audit(str(sample_project))
    assert first is not second
    assert _normalised(first) == _normalised(second)


def test_relative_root_is_resolved(sample_project, fake_status, monkeypatch):
    monkeypatch.chdir(sample_project.parent)
    status = fake_status()
    results = audit_project(sample_project.name, status_query=status)
    assert results.empty_folders == [str(sample_project / "docs")]
    assert status.calls == [str(sample_project)]


def test_vcs_failure_does_not_abort_audit(sample_project, fake_status):
    results = audit_project(str(sample_project), status_query=fake_status(error=VcsQueryError("boom")))
    assert results.unstaged_files == []
    assert results.empty_folders


def test_config_exclusions_apply_to_every_check(make_tree, fake_status):
    root = make_tree({"vendor": {"README": "", "README.md": "", "yarn.lock": "", "empty": {}}, "f": ""})
    cfg = AuditConfig.from_dict({"traversal": {"exclude_dirs": ["vendor"]}})
    results = audit_project(str(root), cfg, fake_status())
    assert results == AuditResults()


@pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
def test_real_git_repository(make_tree):
    root = make_tree({"tracked.txt": "one\n", "other.txt": "x\n"})

    def git(*args):
        subprocess.run(
            ["git", "-c", "user.name=t", "-c", "user.email=t@example.com", *args],
            cwd=root, check=True, capture_output=True,
        )

    git("init", "-q")
    git("add", ".")
    git("commit", "-q", "-m", "init")
    (root / "tracked.txt").write_text("two\n")
    (root / "untracked.txt").write_text("new\n")

    results = audit_project(str(root))
    assert results.unstaged_files == ["tracked.txt"]


def test_results_dict_round_trip(sample_project, fake_status):
    results = audit_project(str(sample_project), status_query=fake_status())
    assert AuditResults.from_dict(dict(results.to_dict(), extra=1)) == results


def test_deeply_nested_project(make_tree, fake_status):
    root = make_tree({})
    deepest = root
    for _ in range(1100):
        deepest = deepest / "a"
        deepest.mkdir()

    try:
        results = audit_project(str(root), status_query=fake_status())
        assert results.empty_folders == [str(deepest)]
    finally:
        # remove bottom-up so tmp dir cleanup never has to recurse this deep
        while deepest != root:
            deepest.rmdir()
            deepest = deepest.parent
