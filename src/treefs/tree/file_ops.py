"""Single-file read, write and rename."""

from __future__ import annotations

import os
from pathlib import Path
from typing import overload

from treefs.errors import PathNotFoundError
from treefs.infrastructure.concurrency import run_blocking
from treefs.tree.ensure import ensure_dir
from treefs.tree.probe import exists


@overload
async def read_file(path: str | os.PathLike[str], encoding: str = ...) -> str: ...
@overload
async def read_file(path: str | os.PathLike[str], encoding: None) -> bytes: ...


async def read_file(path: str | os.PathLike[str], encoding: str | None = "utf-8") -> str | bytes:
    """Read a whole file. Passing encoding=None returns bytes."""
    if encoding is None:
        return await run_blocking(Path(path).read_bytes)
    return await run_blocking(Path(path).read_text, encoding=encoding)


async def write_file(path: str | os.PathLike[str], data: str | bytes, encoding: str = "utf-8") -> None:
    """Create or replace a file, creating its parent directory first."""
    target = Path(path).absolute()
    await ensure_dir(target.parent)
    if isinstance(data, bytes):
        await run_blocking(target.write_bytes, data)
    else:
        await run_blocking(target.write_text, data, encoding=encoding)


async def rename(path: str | os.PathLike[str], new_path: str | os.PathLike[str]) -> None:
    if not await exists(path):
        raise PathNotFoundError("rename", path)
    await run_blocking(os.rename, path, new_path)
