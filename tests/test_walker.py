"""Tests for the shared directory walker."""

import os
from typing import List

import pytest

from projaudit import walker
from projaudit.walker import DirEntry, DirSnapshot, EntryKind, scan_dir, walk


class Recorder:
    def __init__(self, stop_at: str = None):
        self.seen: List[str] = []
        self.stop_at = stop_at

    def visit(self, snapshot: DirSnapshot) -> bool:
        self.seen.append(snapshot.path)
        return os.path.basename(snapshot.path) != self.stop_at


def test_scan_dir_reports_kinds(make_tree):
    root = make_tree({"a.txt": "x", "sub": {}})
    snap = scan_dir(str(root))
    kinds = {e.name: e.kind for e in snap.entries}
    assert kinds == {"a.txt": EntryKind.FILE, "sub": EntryKind.DIRECTORY}
    assert snap.has("a.txt")
    assert not snap.has("missing")
    assert [e.name for e in snap.directories()] == ["sub"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlinks_are_not_descended(make_tree, tmp_path):
    outside = tmp_path / "outside"
    (outside / "inner").mkdir(parents=True)
    root = make_tree({"real": {}})
    try:
        os.symlink(outside, root / "link", target_is_directory=True)
    except OSError:
        pytest.skip("cannot create symlinks here")

    rec = Recorder()
    walk(str(root), [rec])
    assert str(root / "link") not in rec.seen
    assert scan_dir(str(root)).entries  # link still listed as an entry
    kinds = {e.name: e.kind for e in scan_dir(str(root)).entries}
    assert kinds["link"] is EntryKind.OTHER


def test_walk_is_preorder_and_skips_excluded(make_tree):
    root = make_tree({"a": {"b": {}}, ".git": {"objects": {}}, "Node_Modules": {"x": {}}})
    rec = Recorder()
    walk(str(root), [rec], {".git", "node_modules"})

    assert rec.seen[0] == str(root)
    assert rec.seen.index(str(root / "a")) < rec.seen.index(str(root / "a" / "b"))
    assert not any(".git" in p or "Node_Modules" in p for p in rec.seen)


def test_visitor_stop_only_affects_that_visitor(make_tree):
    root = make_tree({"stop": {"below": {}}, "other": {}})
    stopper = Recorder(stop_at="stop")
    full = Recorder()
    walk(str(root), [stopper, full])

    assert str(root / "stop") in stopper.seen
    assert str(root / "stop" / "below") not in stopper.seen
    assert str(root / "other") in stopper.seen
    assert str(root / "stop" / "below") in full.seen


def test_unreadable_directory_is_skipped(make_tree, monkeypatch, caplog):
    root = make_tree({"locked": {"deep": {}}, "open": {"deep": {}}})
    real_scan = walker.scan_dir

    def flaky_scan(path):
        if os.path.basename(path) == "locked":
            raise PermissionError(13, "Permission denied", path)
        return real_scan(path)

    monkeypatch.setattr(walker, "scan_dir", flaky_scan)
    rec = Recorder()
    walk(str(root), [rec])

    assert str(root / "open" / "deep") in rec.seen
    assert not any("locked" in p for p in rec.seen)
    assert "Skipping unreadable directory" in caplog.text


def test_walk_makes_root_absolute(make_tree, monkeypatch):
    root = make_tree({})
    monkeypatch.chdir(root.parent)
    rec = Recorder()
    walk(root.name, [rec])
    assert rec.seen == [str(root)]


def test_very_deep_tree_does_not_exhaust_the_stack(monkeypatch):
    depth = 5000

    def virtual_scan(path):
        level = path.count(os.sep + "a")
        entries = (DirEntry("a", EntryKind.DIRECTORY),) if level < depth else ()
        return DirSnapshot(path=path, entries=entries)

    monkeypatch.setattr(walker, "scan_dir", virtual_scan)
    rec = Recorder()
    walk(os.sep + "root", [rec])
    assert len(rec.seen) == depth + 1
    assert rec.seen[-1].endswith((os.sep + "a") * depth)


def test_siblings_are_visited_in_listing_order(monkeypatch):
    tree = {
        "/r": ["b", "a", "c"],
        "/r/b": ["x"],
    }

    def virtual_scan(path):
        names = tree.get(path.replace(os.sep, "/"), [])
        return DirSnapshot(path=path, entries=tuple(DirEntry(n, EntryKind.DIRECTORY) for n in names))

    monkeypatch.setattr(walker, "scan_dir", virtual_scan)
    rec = Recorder()
    walk("/r", [rec])
    assert [p.replace(os.sep, "/") for p in rec.seen] == ["/r", "/r/b", "/r/b/x", "/r/a", "/r/c"]
