"""Filesystem capability used by drivers, loaders and repositories.

Every layer above this package depends only on the :class:`FileSystem`
protocol. Concrete backings:

- :class:`OsFileSystem` – the local disk.
- :class:`MemoryFileSystem` – an in-memory tree, used for tests and for
  composing sources in memory.
- :class:`BasePathFileSystem` / :func:`scoped` – a view restricted to a
  subtree.
- :class:`ReadOnlyFileSystem` / :func:`read_only` – a view with every mutating
  call rejected.
"""

from .base import DirEntry, FileSystem, clean_path
from .memory import MemoryFileSystem
from .os_fs import OsFileSystem
from .views import BasePathFileSystem, ReadOnlyFileSystem, read_only, scoped

__all__ = [
    "BasePathFileSystem",
    "DirEntry",
    "FileSystem",
    "MemoryFileSystem",
    "OsFileSystem",
    "ReadOnlyFileSystem",
    "clean_path",
    "read_only",
    "scoped",
]
