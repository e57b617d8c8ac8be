"""Filesystem views: subtree scoping and read-only wrapping."""

from __future__ import annotations

import errno
import posixpath

from .base import DirEntry, FileSystem, clean_path


class BasePathFileSystem:
    """Restrict a filesystem to the subtree rooted at ``base``.

    Paths are resolved relative to ``base``; a path that would climb out of
    the subtree is rejected with ``PermissionError``.
    """

    def __init__(self, fs: FileSystem, base: str) -> None:
        self._fs = fs
        self._base = clean_path(base)

    @property
    def base(self) -> str:
        return self._base

    def _real(self, path: str) -> str:
        relative = clean_path(path.lstrip("/"))
        if relative == ".." or relative.startswith("../"):
            raise PermissionError(errno.EACCES, "path escapes base directory", path)
        if relative == ".":
            return self._base
        return posixpath.join(self._base, relative)

    def list_dir(self, path: str = ".") -> list[DirEntry]:
        return self._fs.list_dir(self._real(path))

    def read_file(self, path: str) -> bytes:
        return self._fs.read_file(self._real(path))

    def write_file(self, path: str, data: bytes) -> None:
        self._fs.write_file(self._real(path), data)

    def remove(self, path: str) -> None:
        self._fs.remove(self._real(path))

    def exists(self, path: str) -> bool:
        return self._fs.exists(self._real(path))

    def dir_exists(self, path: str) -> bool:
        return self._fs.dir_exists(self._real(path))

    def make_dirs(self, path: str) -> None:
        self._fs.make_dirs(self._real(path))


class ReadOnlyFileSystem:
    """Wrap a filesystem so every mutating call raises ``PermissionError``."""

    def __init__(self, fs: FileSystem) -> None:
        self._fs = fs

    def list_dir(self, path: str = ".") -> list[DirEntry]:
        return self._fs.list_dir(path)

    def read_file(self, path: str) -> bytes:
        return self._fs.read_file(path)

    def write_file(self, path: str, data: bytes) -> None:  # noqa: ARG002
        raise PermissionError(errno.EPERM, "read-only filesystem", path)

    def remove(self, path: str) -> None:
        raise PermissionError(errno.EPERM, "read-only filesystem", path)

    def exists(self, path: str) -> bool:
        return self._fs.exists(path)

    def dir_exists(self, path: str) -> bool:
        return self._fs.dir_exists(path)

    def make_dirs(self, path: str) -> None:
        raise PermissionError(errno.EPERM, "read-only filesystem", path)


def scoped(fs: FileSystem, base: str) -> BasePathFileSystem:
    """Return a view of ``fs`` restricted to ``base``."""
    return BasePathFileSystem(fs, base)


def read_only(fs: FileSystem) -> ReadOnlyFileSystem:
    """Return a view of ``fs`` that rejects writes."""
    return ReadOnlyFileSystem(fs)
