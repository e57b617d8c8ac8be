"""Filesystem-backed resource repository.

Each resource is stored as one JSON file in a dedicated directory. File names
are random UUIDs and carry no meaning: resources are always found by reading
the files and comparing their identity. Keys inside the files are the
resources' own (camelCase) field names.

A single reader/writer lock guards the whole repository instance: reads share
it, ``add``/``remove_all`` take it exclusively.
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from projectkit.fs import FileSystem
from projectkit.utils.rwlock import ReadWriteLock

from .errors import RepositoryIOError, ResourceAlreadyExistsError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)
M = TypeVar("M", bound=BaseModel)

STORAGE_EXTENSION = ".json"


class FsRepository(Generic[T]):
    """
    Generic one-file-per-resource repository.

    Subclasses set :attr:`model` and implement :meth:`identity`; they may
    override :meth:`sort_key` (defaults to the identity) and
    :attr:`io_error` (the kind-specific :class:`RepositoryIOError`).

    Args:
        fs: The directory the repository owns. It must exist.
    """

    model: Type[T]
    io_error: Type[RepositoryIOError] = RepositoryIOError

    def __init__(self, fs: FileSystem) -> None:
        self._fs = fs
        self._lock = ReadWriteLock()

    def identity(self, resource: T) -> str:
        raise NotImplementedError

    def sort_key(self, resource: T) -> str:
        return self.identity(resource)

    # ------------------------------------------------------------------
    # File helpers (callers hold the lock). ``fs`` and ``model`` default to
    # the repository's own directory and record type.
    # ------------------------------------------------------------------

    def _list_files(self) -> List[str]:
        try:
            entries = self._fs.list_dir(".")
        except OSError as exc:
            raise self.io_error("list", ".") from exc
        return [
            entry.name
            for entry in entries
            if not entry.is_dir and entry.name.lower().endswith(STORAGE_EXTENSION)
        ]

    def _load_file(self, filename: str, *, fs: Optional[FileSystem] = None, model: Optional[Type[M]] = None) -> M:
        try:
            data = (self._fs if fs is None else fs).read_file(filename)
        except OSError as exc:
            raise self.io_error("read", filename) from exc
        try:
            return (self.model if model is None else model).model_validate_json(data)
        except ValidationError as exc:
            raise self.io_error("decode", filename) from exc

    def _save_file(self, filename: str, resource: BaseModel, *, fs: Optional[FileSystem] = None) -> None:
        data = resource.model_dump_json(by_alias=True).encode("utf-8")
        try:
            (self._fs if fs is None else fs).write_file(filename, data)
        except OSError as exc:
            raise self.io_error("write", filename) from exc

    def _load_all(self) -> List[tuple[str, T]]:
        return [(filename, self._load_file(filename)) for filename in self._list_files()]

    def _find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for filename in self._list_files():
            resource = self._load_file(filename)
            if predicate(resource):
                return resource
        return None

    @staticmethod
    def _new_filename() -> str:
        return f"{uuid.uuid4()}{STORAGE_EXTENSION}"

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def get_all(self) -> List[T]:
        """
        Return every stored resource, sorted ascending by :meth:`sort_key`.

        An empty repository yields an empty list. Any unreadable or
        undecodable file aborts the call.
        """
        with self._lock.read_locked():
            resources = [resource for _, resource in self._load_all()]
        return sorted(resources, key=self.sort_key)

    def remove_all(self) -> None:
        """Delete every stored resource. Safe on an empty repository."""
        with self._lock.write_locked():
            files = self._list_files()
            for filename in files:
                try:
                    self._fs.remove(filename)
                except OSError as exc:
                    raise self.io_error("remove", filename) from exc
        logger.debug("Removed %d files from %s", len(files), type(self).__name__)

    def _add(self, resource: T, duplicate_error: Optional[Type[ResourceAlreadyExistsError]] = None) -> None:
        """Store ``resource``; with ``duplicate_error`` reject an existing identity first."""
        with self._lock.write_locked():
            if duplicate_error is not None:
                identity = self.identity(resource)
                if self._find(lambda existing: self.identity(existing) == identity) is not None:
                    raise duplicate_error(identity)
            self._save_file(self._new_filename(), resource)
