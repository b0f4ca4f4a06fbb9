"""Shared fixtures for tree tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


def make_tree(root: Path, files: dict[str, str | bytes], dirs: list[str] | None = None) -> Path:
    """Create files (and extra empty directories) under root."""
    root.mkdir(parents=True, exist_ok=True)
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            full_path.write_bytes(content)
        else:
            full_path.write_text(content)
    for rel_dir in dirs or []:
        (root / rel_dir).mkdir(parents=True, exist_ok=True)
    return root


@pytest.fixture()
def sample_tree(tmp_path: Path) -> Path:
    """src/a.txt, src/sub/b.txt, src/sub/deep/c.txt and an empty src/empty."""
    return make_tree(
        tmp_path / "src",
        {
            "a.txt": "alpha",
            "sub/b.txt": "beta",
            "sub/deep/c.txt": "gamma",
        },
        dirs=["empty"],
    )


@pytest.fixture()
def sorted_listdir(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make directory enumeration order deterministic."""
    import os

    real_listdir = os.listdir
    monkeypatch.setattr(os, "listdir", lambda path: sorted(real_listdir(path)))
