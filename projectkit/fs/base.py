"""Core FileSystem protocol.

Paths handed to a :class:`FileSystem` always use POSIX separators. ``"."``
(or the empty string) denotes the root of the filesystem. Failures are
reported with the builtin ``OSError`` family (``FileNotFoundError``,
``NotADirectoryError``, ``PermissionError`` ...), exactly like the ``os``
module does, so callers can match on them without knowing the backing store.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class DirEntry:
    """A single entry returned by :meth:`FileSystem.list_dir`."""

    name: str
    is_dir: bool


def clean_path(path: str) -> str:
    """Normalize ``path`` (collapse ``.``/``..`` segments and duplicate slashes)."""
    if not path:
        return "."
    return posixpath.normpath(path)


@runtime_checkable
class FileSystem(Protocol):
    """Abstract filesystem capability.

    Implementations decide the listing order of :meth:`list_dir`; callers must
    not assume it is sorted.
    """

    def list_dir(self, path: str = ".") -> list[DirEntry]:
        """Return the entries of directory ``path``."""
        ...

    def read_file(self, path: str) -> bytes:
        """Return the full content of file ``path``."""
        ...

    def write_file(self, path: str, data: bytes) -> None:
        """Create or replace file ``path`` with ``data``."""
        ...

    def remove(self, path: str) -> None:
        """Remove file ``path``."""
        ...

    def exists(self, path: str) -> bool:
        """Return whether anything exists at ``path``."""
        ...

    def dir_exists(self, path: str) -> bool:
        """Return whether ``path`` exists and is a directory."""
        ...

    def make_dirs(self, path: str) -> None:
        """Create directory ``path`` and any missing parents."""
        ...
