"""Idempotent "mkdir -p"."""

from __future__ import annotations

import os
from pathlib import Path

from treefs.infrastructure import config
from treefs.infrastructure.concurrency import run_blocking
from treefs.infrastructure.logger import logger


async def _make_component(directory: Path, lenient: bool) -> None:
    try:
        await run_blocking(os.mkdir, directory)
    except FileExistsError:
        return
    except OSError as err:
        # Some filesystems report EACCES/EROFS before EEXIST for a directory that is already there.
        if await run_blocking(os.path.isdir, directory):
            return
        if not lenient:
            raise
        logger.warning("Ignoring mkdir failure", path=str(directory), error=str(err))


async def ensure_dir(path: str | os.PathLike[str], *, lenient: bool | None = None) -> None:
    """Create every missing directory of `path`, from the root down.

    Safe to call repeatedly and from concurrent callers with overlapping
    paths: a component that already exists is never an error. Other mkdir
    failures propagate unless `lenient` is set (default taken from
    TREEFS_LENIENT_MKDIR), in which case they are logged and skipped.
    """
    if lenient is None:
        lenient = config.LENIENT_MKDIR
    target = Path(path).absolute()

    for directory in [*reversed(target.parents), target]:
        await _make_component(directory, lenient)

    if not lenient and not await run_blocking(os.path.isdir, target):
        raise NotADirectoryError(f"ensure_dir: {target} exists and is not a directory")
