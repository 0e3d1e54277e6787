"""Pytest configuration and fixtures for projaudit tests."""

from pathlib import Path
from typing import Dict, List, Union

import pytest

from projaudit.vcs import FileStatus

Tree = Dict[str, Union[str, "Tree"]]


def build_tree(root: Path, layout: Tree) -> Path:
    """Create files (str values) and directories (dict values) under *root*."""
    root.mkdir(parents=True, exist_ok=True)
    for name, content in layout.items():
        target = root / name
        if isinstance(content, dict):
            build_tree(target, content)
        else:
            target.write_text(content)
    return root


class FakeStatusQuery:
    """Stands in for git; returns canned statuses or raises."""

    def __init__(self, statuses: List[FileStatus] = None, error: Exception = None):
        self.statuses = statuses or []
        self.error = error
        self.calls: List[str] = []

    def query_status(self, root: str) -> List[FileStatus]:
        self.calls.append(root)
        if self.error is not None:
            raise self.error
        return list(self.statuses)


@pytest.fixture
def make_tree(tmp_path):
    """Build a directory tree from a nested dict and return its root."""
    def _make(layout: Tree, name: str = "project") -> Path:
        return build_tree(tmp_path / name, layout)
    return _make


@pytest.fixture
def fake_status():
    """Factory for fake version control collaborators."""
    def _make(statuses=None, error=None) -> FakeStatusQuery:
        return FakeStatusQuery(statuses, error)
    return _make


@pytest.fixture
def sample_project(make_tree):
    """A project that fails every filesystem check."""
    return make_tree({
        "README.md": "# top",
        "README": "top again",
        ".env.example": "KEY=",
        "package-lock.json": "{}",
        "docs": {},
        "web": {
            "yarn.lock": "",
            "README.md": "# web",
        },
        "node_modules": {"pkg": {}},
        "dist": {"README.md": "", "README": ""},
    })
