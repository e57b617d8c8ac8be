"""Project configuration discovery and merging.

The configuration file is looked up in the user's home directory and in the
working directory, in that order. Every file found is loaded and validated
on its own, then all of them are merged: agent lists and every source list
are concatenated, home entries first.
"""

from __future__ import annotations

import logging
import os
import posixpath
from pathlib import Path
from typing import Callable, List, Optional

import yaml
from pydantic import ValidationError

from projectkit.ai import AIConfig
from projectkit.core.config import get_settings
from projectkit.doc import DocConfig
from projectkit.doc.standard.models import StandardConfig
from projectkit.fs import FileSystem, OsFileSystem
from projectkit.resource.loader import format_violations
from projectkit.resource.models import SourcesConfig
from projectkit.rulebook.models import RulebookConfig

from .errors import ConfigLoadError, ConfigNotResolvedError, ConfigValidationError
from .models import ProjectConfig

logger = logging.getLogger(__name__)

DirFn = Callable[[], str]


def _home_dir() -> str:
    return str(Path.home())


def _merge_sources(*configs: Optional[SourcesConfig]) -> list:
    return [source for config in configs if config is not None for source in config.sources]


def merge_configs(configs: List[ProjectConfig]) -> ProjectConfig:
    """
    Merge project configurations in order.

    The result always carries every section, possibly with empty source
    lists, so callers do not need to check for missing sections.
    """
    ais = [config.ai for config in configs if config.ai is not None]
    docs = [config.doc for config in configs if config.doc is not None]
    standards = [doc.standard for doc in docs if doc.standard is not None]
    return ProjectConfig(
        agents=[agent for config in configs for agent in config.agents],
        rulebook=RulebookConfig(sources=_merge_sources(*(config.rulebook for config in configs))),
        ai=AIConfig(
            instruction=SourcesConfig(sources=_merge_sources(*(ai.instruction for ai in ais))),
            skill=SourcesConfig(sources=_merge_sources(*(ai.skill for ai in ais))),
            workflow=SourcesConfig(sources=_merge_sources(*(ai.workflow for ai in ais))),
            mcp=SourcesConfig(sources=_merge_sources(*(ai.mcp for ai in ais))),
        ),
        doc=DocConfig(
            standard=StandardConfig(
                sources=_merge_sources(*standards),
                render=[render for standard in standards for render in standard.render],
            ),
        ),
    )


class ProjectConfigLoader:
    """
    Load the merged project configuration.

    Args:
        fs: Filesystem the configuration files are read from. Defaults to the
            local disk.
        work_dir_fn: Returns the working directory. Defaults to ``os.getcwd``.
        home_dir_fn: Returns the home directory. Defaults to ``Path.home``.
        config_file_name: Name of the configuration file. Defaults to the
            ``PROJECTKIT_CONFIG_FILE_NAME`` setting.
    """

    def __init__(
        self,
        fs: Optional[FileSystem] = None,
        work_dir_fn: DirFn = os.getcwd,
        home_dir_fn: DirFn = _home_dir,
        config_file_name: Optional[str] = None,
    ) -> None:
        self._fs = fs if fs is not None else OsFileSystem()
        self._work_dir_fn = work_dir_fn
        self._home_dir_fn = home_dir_fn
        self._config_file_name = config_file_name or get_settings().config_file_name

    def _candidate(self, dir_fn: DirFn, label: str) -> Optional[str]:
        try:
            directory = dir_fn()
        except (OSError, RuntimeError, KeyError) as exc:
            logger.debug("Skipping %s config lookup: %s", label, exc)
            return None
        return posixpath.normpath(posixpath.join(directory, self._config_file_name))

    def resolve_paths(self) -> List[str]:
        """
        Return the configuration files to load, home first.

        Raises:
            ConfigNotResolvedError: Neither location holds a configuration file.
        """
        candidates = [
            path
            for path in (
                self._candidate(self._home_dir_fn, "home"),
                self._candidate(self._work_dir_fn, "working directory"),
            )
            if path is not None
        ]
        paths: List[str] = []
        for path in candidates:
            if path not in paths and self._fs.exists(path):
                paths.append(path)
        if not paths:
            raise ConfigNotResolvedError(candidates)
        return paths

    def load_file(self, path: str) -> ProjectConfig:
        """
        Load and validate a single configuration file.

        Raises:
            ConfigLoadError: The file cannot be read or is not a YAML mapping.
            ConfigValidationError: The file violates the configuration schema.
        """
        try:
            data = self._fs.read_file(path)
        except OSError as exc:
            raise ConfigLoadError(path, "read failed") from exc
        try:
            document = yaml.safe_load(data)
        except yaml.YAMLError as exc:
            raise ConfigLoadError(path, "invalid yaml") from exc
        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ConfigLoadError(path, "document must be a mapping")
        try:
            return ProjectConfig.model_validate(document)
        except ValidationError as exc:
            raise ConfigValidationError(path, format_violations(exc)) from exc

    def load(self) -> ProjectConfig:
        """Resolve, load, validate and merge every configuration file."""
        paths = self.resolve_paths()
        configs = [self.load_file(path) for path in paths]
        logger.debug("Loaded project config from %s", ", ".join(paths))
        return merge_configs(configs)
