"""Tree domain types."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, model_validator


class NodeKind(str, Enum):
    ABSENT = "absent"
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"  # socket, FIFO, device: present, but none of the above


class Metadata(BaseModel):
    """Result of probing one path. Never raised, always returned."""

    model_config = ConfigDict(frozen=True)

    kind: NodeKind
    size: int | None = None
    mtime: float | None = None

    @property
    def is_absent(self) -> bool:
        return self.kind is NodeKind.ABSENT

    @property
    def is_directory(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    @property
    def is_symlink(self) -> bool:
        return self.kind is NodeKind.SYMLINK


ABSENT = Metadata(kind=NodeKind.ABSENT)


class DirEntry(BaseModel):
    """One classified node found by a listing or a walk."""

    model_config = ConfigDict(frozen=True)

    name: str
    absolute_path: Path
    relative_path: Path  # == name for immediate children, root-relative in a walk
    is_directory: bool = False
    is_file: bool = False
    is_symlink: bool = False

    @model_validator(mode="after")
    def _single_kind(self) -> DirEntry:
        if self.is_directory + self.is_file + self.is_symlink > 1:
            raise ValueError("a DirEntry has at most one of is_directory, is_file, is_symlink")
        return self

    @classmethod
    def from_metadata(cls, name: str, absolute_path: Path, relative_path: Path, meta: Metadata) -> DirEntry:
        return cls(
            name=name,
            absolute_path=absolute_path,
            relative_path=relative_path,
            is_directory=meta.is_directory,
            is_file=meta.is_file,
            is_symlink=meta.is_symlink,
        )
