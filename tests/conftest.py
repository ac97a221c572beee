import os

import pytest


@pytest.fixture
def deny_listing(monkeypatch):
    """Make ``os.scandir`` raise PermissionError for the given folders."""
    real_scandir = os.scandir
    denied: set[str] = set()

    def fake_scandir(path="."):
        if os.fspath(path) in denied:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)

    def deny(*paths):
        denied.update(os.fspath(p) for p in paths)

    return deny


@pytest.fixture
def sample_tree(tmp_path):
    (tmp_path / "a.txt").write_text("Hello World", encoding="utf-8")
    (tmp_path / "b.bin").write_bytes(b"\xff\xfe")
    (tmp_path / "c.txt").write_text("hello world", encoding="utf-8")
    return tmp_path
