"""Local disk filesystem."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from .base import DirEntry


class OsFileSystem:
    """A :class:`~projectkit.fs.FileSystem` backed by the local disk.

    With ``root=None`` paths are used as given: absolute paths are absolute,
    relative paths are relative to the process working directory. With a
    ``root``, every path (including absolute ones) is placed under it.
    """

    def __init__(self, root: Optional[Union[str, Path]] = None) -> None:
        self._root = Path(root) if root is not None else None

    def _full(self, path: str) -> Path:
        if self._root is None:
            return Path(path or ".")
        return self._root / (path.lstrip("/") or ".")

    def list_dir(self, path: str = ".") -> list[DirEntry]:
        with os.scandir(self._full(path)) as entries:
            return sorted(
                (DirEntry(name=entry.name, is_dir=entry.is_dir()) for entry in entries),
                key=lambda entry: entry.name,
            )

    def read_file(self, path: str) -> bytes:
        return self._full(path).read_bytes()

    def write_file(self, path: str, data: bytes) -> None:
        target = self._full(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)

    def remove(self, path: str) -> None:
        target = self._full(path)
        if target.is_dir():
            target.rmdir()
        else:
            target.unlink()

    def exists(self, path: str) -> bool:
        return self._full(path).exists()

    def dir_exists(self, path: str) -> bool:
        return self._full(path).is_dir()

    def make_dirs(self, path: str) -> None:
        self._full(path).mkdir(parents=True, exist_ok=True)
