"""Reference driver for the ``local://`` scheme.

``local://<path>`` addresses a directory on the backing filesystem (the local
disk by default). The path may be absolute or relative and is normalized
(``.``/``..`` segments collapsed) before use. The returned view is scoped to
that directory and read-only, so loaders can never modify their own sources.
"""

from __future__ import annotations

import logging
from typing import Optional

from projectkit.fs import FileSystem, OsFileSystem, clean_path, read_only, scoped

from .errors import EmptyPathError, PathCheckError, PathNotFoundError, UnsupportedSchemeError

logger = logging.getLogger(__name__)

LOCAL_SCHEME = "local"


class LocalDriver:
    """
    Driver resolving ``local://`` URIs against a root filesystem.

    Args:
        root_fs: Filesystem the paths are looked up in. Defaults to an
            :class:`~projectkit.fs.OsFileSystem` using paths as given.
    """

    def __init__(self, root_fs: Optional[FileSystem] = None) -> None:
        self._root_fs = root_fs if root_fs is not None else OsFileSystem()
        self._prefix = f"{LOCAL_SCHEME}://"

    def get_supported_schemes(self) -> list[str]:
        return [LOCAL_SCHEME]

    def resolve(self, uri: str) -> FileSystem:
        """
        Resolve ``uri`` into a read-only view of the addressed directory.

        Raises:
            UnsupportedSchemeError: If ``uri`` does not start with ``local://``.
            EmptyPathError: If nothing follows the scheme separator.
            PathCheckError: If checking the directory failed.
            PathNotFoundError: If the directory does not exist.
        """
        if not uri.startswith(self._prefix):
            raise UnsupportedSchemeError(uri)

        path = uri[len(self._prefix) :]
        if not path:
            raise EmptyPathError(uri)

        path = clean_path(path)

        try:
            exists = self._root_fs.dir_exists(path)
        except OSError as exc:
            raise PathCheckError(path) from exc
        if not exists:
            raise PathNotFoundError(path)

        logger.debug("Local source resolved: uri=%s path=%s", uri, path)
        return read_only(scoped(self._root_fs, path))
