"""Subtree removal with depth-descending directory deletion."""

from __future__ import annotations

import os
from pathlib import Path

from treefs.errors import PathNotFoundError
from treefs.infrastructure.concurrency import gather_bounded, run_blocking
from treefs.infrastructure.logger import logger
from treefs.tree.probe import probe
from treefs.tree.walker import walk
from treefs.types import DirEntry


def _depth(entry: DirEntry) -> int:
    return len(entry.absolute_path.parts)


async def _unlink(entry: DirEntry) -> None:
    await run_blocking(os.unlink, entry.absolute_path)


async def remove(path: str | os.PathLike[str], *, ignore_not_exist: bool = False) -> None:
    """Delete a file, a symlink, or a whole directory subtree.

    Non-directory entries are unlinked concurrently. Directories are then
    removed one at a time, deepest first, so rmdir only ever sees an empty
    directory. The first failure aborts the rest; nothing is rolled back.
    """
    target = Path(path).absolute()
    meta = await probe(target)

    if meta.is_absent:
        if ignore_not_exist:
            return
        raise PathNotFoundError("remove", path)

    if not meta.is_directory:
        await run_blocking(os.unlink, target)
        return

    entries = await walk(target)
    if not entries:
        await run_blocking(os.rmdir, target)
        return

    leaves = [e for e in entries if not e.is_directory]
    dirs = sorted((e for e in entries if e.is_directory), key=_depth, reverse=True)
    logger.debug("Removing tree", path=str(target), files=len(leaves), dirs=len(dirs))

    await gather_bounded(_unlink, leaves)
    for entry in dirs:
        await run_blocking(os.rmdir, entry.absolute_path)

    await run_blocking(os.rmdir, target)
