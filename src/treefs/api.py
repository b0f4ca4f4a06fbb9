"""Barrel re-export of all tree operations and types."""

from treefs.errors import PathNotFoundError, TreeFsError
from treefs.tree.copier import copy, copy_file
from treefs.tree.ensure import ensure_dir
from treefs.tree.file_ops import read_file, rename, write_file
from treefs.tree.listing import list_dir, list_dirs, list_files
from treefs.tree.probe import exists, probe
from treefs.tree.remover import remove
from treefs.tree.walker import walk
from treefs.tree.watch import PathWatcher
from treefs.types import ABSENT, DirEntry, Metadata, NodeKind

__all__ = [
    "ABSENT",
    "DirEntry",
    "Metadata",
    "NodeKind",
    "PathNotFoundError",
    "PathWatcher",
    "TreeFsError",
    "copy",
    "copy_file",
    "ensure_dir",
    "exists",
    "list_dir",
    "list_dirs",
    "list_files",
    "probe",
    "read_file",
    "remove",
    "rename",
    "walk",
    "write_file",
]
