"""In-memory filesystem."""

from __future__ import annotations

import errno
import threading
from dataclasses import dataclass, field
from typing import Union

from .base import DirEntry, clean_path


@dataclass(slots=True)
class _File:
    content: bytes


@dataclass(slots=True)
class _Directory:
    entries: dict[str, Union["_Directory", _File]] = field(default_factory=dict)


def _segments(path: str) -> list[str]:
    cleaned = clean_path(path.lstrip("/"))
    if cleaned == ".":
        return []
    parts = cleaned.split("/")
    if parts[0] == "..":
        raise PermissionError(errno.EACCES, "path escapes filesystem root", path)
    return parts


class MemoryFileSystem:
    """A dictionary-backed :class:`~projectkit.fs.FileSystem`.

    Listings are returned sorted by name. A single internal lock keeps
    concurrent mutations consistent.
    """

    def __init__(self) -> None:
        self._root = _Directory()
        self._lock = threading.Lock()

    def _get_node(self, path: str) -> Union[_Directory, _File]:
        current: Union[_Directory, _File] = self._root
        for segment in _segments(path):
            if not isinstance(current, _Directory):
                raise NotADirectoryError(errno.ENOTDIR, "not a directory", path)
            try:
                current = current.entries[segment]
            except KeyError:
                raise FileNotFoundError(errno.ENOENT, "no such file or directory", path) from None
        return current

    def _mkdirs(self, segments: list[str], path: str) -> _Directory:
        current = self._root
        for segment in segments:
            existing = current.entries.get(segment)
            if existing is None:
                child = _Directory()
                current.entries[segment] = child
                current = child
                continue
            if isinstance(existing, _File):
                raise NotADirectoryError(errno.ENOTDIR, "not a directory", path)
            current = existing
        return current

    def list_dir(self, path: str = ".") -> list[DirEntry]:
        with self._lock:
            node = self._get_node(path)
            if not isinstance(node, _Directory):
                raise NotADirectoryError(errno.ENOTDIR, "not a directory", path)
            return [
                DirEntry(name=name, is_dir=isinstance(child, _Directory))
                for name, child in sorted(node.entries.items())
            ]

    def read_file(self, path: str) -> bytes:
        with self._lock:
            node = self._get_node(path)
            if not isinstance(node, _File):
                raise IsADirectoryError(errno.EISDIR, "is a directory", path)
            return node.content

    def write_file(self, path: str, data: bytes) -> None:
        segments = _segments(path)
        if not segments:
            raise IsADirectoryError(errno.EISDIR, "is a directory", path)
        with self._lock:
            parent = self._mkdirs(segments[:-1], path)
            if isinstance(parent.entries.get(segments[-1]), _Directory):
                raise IsADirectoryError(errno.EISDIR, "is a directory", path)
            parent.entries[segments[-1]] = _File(content=bytes(data))

    def remove(self, path: str) -> None:
        segments = _segments(path)
        if not segments:
            raise PermissionError(errno.EPERM, "cannot remove filesystem root", path)
        with self._lock:
            parent = self._get_node("/".join(segments[:-1]))
            if not isinstance(parent, _Directory) or segments[-1] not in parent.entries:
                raise FileNotFoundError(errno.ENOENT, "no such file or directory", path)
            node = parent.entries[segments[-1]]
            if isinstance(node, _Directory) and node.entries:
                raise OSError(errno.ENOTEMPTY, "directory not empty", path)
            del parent.entries[segments[-1]]

    def exists(self, path: str) -> bool:
        with self._lock:
            try:
                self._get_node(path)
            except (FileNotFoundError, NotADirectoryError):
                return False
            return True

    def dir_exists(self, path: str) -> bool:
        with self._lock:
            try:
                return isinstance(self._get_node(path), _Directory)
            except (FileNotFoundError, NotADirectoryError):
                return False

    def make_dirs(self, path: str) -> None:
        segments = _segments(path)
        with self._lock:
            self._mkdirs(segments, path)
