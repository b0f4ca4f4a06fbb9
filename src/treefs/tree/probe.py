"""Never-failing metadata probe for a single path."""

from __future__ import annotations

import os
import stat

from treefs.infrastructure.concurrency import run_blocking
from treefs.infrastructure.logger import logger
from treefs.types import ABSENT, Metadata, NodeKind


def _kind_of(mode: int) -> NodeKind:
    if stat.S_ISLNK(mode):
        return NodeKind.SYMLINK
    if stat.S_ISDIR(mode):
        return NodeKind.DIRECTORY
    if stat.S_ISREG(mode):
        return NodeKind.FILE
    return NodeKind.OTHER


async def probe(path: str | os.PathLike[str]) -> Metadata:
    """Return the metadata of `path` without following a final symlink.

    Any OSError (missing path, permission denied, ...) yields ABSENT.
    """
    try:
        st = await run_blocking(os.lstat, path)
    except OSError as err:
        logger.debug("Stat failed, treating as absent", path=os.fspath(path), error=str(err))
        return ABSENT
    return Metadata(kind=_kind_of(st.st_mode), size=st.st_size, mtime=st.st_mtime)


async def exists(path: str | os.PathLike[str]) -> bool:
    """True if anything at all is present at `path`."""
    return not (await probe(path)).is_absent
