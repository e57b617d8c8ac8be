"""Project root discovery."""

from __future__ import annotations

import logging
import posixpath
from typing import Optional

from projectkit.core.config import get_settings
from projectkit.fs import BasePathFileSystem, FileSystem, scoped

from .errors import ProjectRootNotFoundError

logger = logging.getLogger(__name__)

GIT_DIR_NAME = ".git"


def find_project_root(
    fs: FileSystem,
    current_dir: str,
    home_dir: str,
    config_file_name: Optional[str] = None,
) -> BasePathFileSystem:
    """
    Walk up from ``current_dir`` to the nearest project root.

    A project root is a directory holding a ``.git`` directory or a project
    configuration file. The home directory itself is never a project root.

    Args:
        fs: Filesystem to search (absolute paths).
        current_dir: Directory the search starts in.
        home_dir: Directory at which the search stops.
        config_file_name: Configuration file name. Defaults to the setting.

    Returns:
        ``fs`` scoped to the project root; its ``base`` is the root path.

    Raises:
        ProjectRootNotFoundError: The search reached the home directory or the
            filesystem root without a match.
    """
    config_file_name = config_file_name or get_settings().config_file_name
    home_dir = posixpath.normpath(home_dir)
    directory = posixpath.normpath(current_dir)
    while directory != home_dir:
        if fs.dir_exists(posixpath.join(directory, GIT_DIR_NAME)) or fs.exists(
            posixpath.join(directory, config_file_name)
        ):
            logger.debug("Found project root at %s", directory)
            return scoped(fs, directory)
        parent = posixpath.dirname(directory)
        if parent == directory:
            break
        directory = parent
    raise ProjectRootNotFoundError(current_dir)
