"""Recursive descendant enumeration."""

from __future__ import annotations

import os
from pathlib import Path

from treefs.tree.listing import classify_children
from treefs.types import DirEntry


async def walk(path: str | os.PathLike[str]) -> list[DirEntry]:
    """Every descendant of `path`, files and directories alike.

    Each directory's children are listed first, then its subdirectories
    are expanded one after another in listing order and appended. Symlinks
    are reported but never followed. A directory that vanishes or cannot
    be read mid-walk contributes nothing.
    """
    root = Path(path).absolute()
    result: list[DirEntry] = []

    async def dive(directory: Path) -> None:
        entries = await classify_children(directory, root)
        result.extend(entries)
        for entry in entries:
            if entry.is_directory:
                await dive(entry.absolute_path)

    await dive(root)
    return result
