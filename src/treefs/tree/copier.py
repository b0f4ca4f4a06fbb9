"""File and subtree copying."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from treefs.errors import PathNotFoundError
from treefs.infrastructure.concurrency import gather_bounded, run_blocking
from treefs.infrastructure.logger import logger
from treefs.tree.ensure import ensure_dir
from treefs.tree.probe import probe
from treefs.tree.remover import remove
from treefs.tree.walker import walk
from treefs.types import DirEntry


def _copy_bytes(src: Path, dest: Path) -> None:
    shutil.copyfile(src, dest)
    shutil.copystat(src, dest)


async def copy_file(src: str | os.PathLike[str], dest: str | os.PathLike[str]) -> None:
    """Copy one file's bytes and timestamps to `dest`, creating dest's parent directory first.

    `dest` is the final path: an existing directory there raises
    IsADirectoryError rather than receiving the file.
    """
    dest_path = Path(dest).absolute()
    await ensure_dir(dest_path.parent)
    await run_blocking(_copy_bytes, Path(src), dest_path)


async def _copy_link(src: Path, dest: Path) -> None:
    await ensure_dir(dest.parent)
    target = await run_blocking(os.readlink, src)
    try:
        await run_blocking(os.symlink, target, dest)
    except FileExistsError:
        # An existing non-directory at dest is replaced.
        await run_blocking(os.unlink, dest)
        await run_blocking(os.symlink, target, dest)


async def copy(src: str | os.PathLike[str], dest: str | os.PathLike[str], *, overwrite: bool = False) -> None:
    """Copy a file or a directory subtree to `dest` (the final path, not its parent).

    A directory copy merges into an existing `dest` unless `overwrite` is
    set, in which case `dest` is removed first. Files are copied
    concurrently; the first failure propagates and nothing is rolled back.
    """
    src_path = Path(src).absolute()
    dest_path = Path(dest).absolute()
    meta = await probe(src_path)

    if meta.is_absent:
        raise PathNotFoundError("copy", src)

    # A symlinked source is copied as whatever it points to.
    is_directory = meta.is_directory or (meta.is_symlink and await run_blocking(os.path.isdir, src_path))
    if not is_directory:
        await copy_file(src_path, dest_path)
        return

    if overwrite:
        await remove(dest_path, ignore_not_exist=True)

    entries = await walk(src_path)
    logger.debug("Copying tree", src=str(src_path), dest=str(dest_path), entries=len(entries))

    await ensure_dir(dest_path)

    async def place(entry: DirEntry) -> None:
        target = dest_path / entry.relative_path
        if entry.is_directory:
            await ensure_dir(target)
        elif entry.is_symlink:
            await _copy_link(entry.absolute_path, target)
        elif entry.is_file:
            await copy_file(entry.absolute_path, target)

    await gather_bounded(place, entries)
