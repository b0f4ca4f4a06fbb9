"""Immediate-children listing with type classification."""

from __future__ import annotations

import os
from pathlib import Path

from treefs.infrastructure.concurrency import gather_bounded, run_blocking
from treefs.infrastructure.logger import logger
from treefs.tree.probe import probe
from treefs.types import DirEntry


async def read_names(path: Path) -> list[str]:
    """Names in `path` in enumeration order; empty if it cannot be read."""
    try:
        return await run_blocking(os.listdir, path)
    except OSError as err:
        logger.debug("Listing failed, treating as empty", path=str(path), error=str(err))
        return []


async def classify_children(directory: Path, root: Path) -> list[DirEntry]:
    """Probe every child of `directory`, with relative paths taken against `root`."""
    names = await read_names(directory)

    async def classify(name: str) -> DirEntry:
        child = directory / name
        meta = await probe(child)
        return DirEntry.from_metadata(name, child, child.relative_to(root), meta)

    return await gather_bounded(classify, names)


async def list_dir(path: str | os.PathLike[str]) -> list[DirEntry]:
    """List the immediate children of `path`.

    A missing or unreadable directory lists as empty.
    """
    directory = Path(path).absolute()
    return await classify_children(directory, directory)


async def list_dirs(path: str | os.PathLike[str]) -> list[DirEntry]:
    return [e for e in await list_dir(path) if e.is_directory]


async def list_files(path: str | os.PathLike[str]) -> list[DirEntry]:
    return [e for e in await list_dir(path) if e.is_file]
