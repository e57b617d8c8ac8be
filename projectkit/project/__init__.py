"""Project configuration, layout and repository synchronization."""

from .config_loader import ProjectConfigLoader, merge_configs
from .errors import (
    ConfigLoadError,
    ConfigNotResolvedError,
    ConfigValidationError,
    ProjectError,
    ProjectRootNotFoundError,
    RepositoryCreateError,
)
from .models import AgentConfig, ProjectConfig
from .repository_factory import RepositoryFactory
from .root import find_project_root
from .update import LoadedResources, UpdateAction, collect_resources

__all__ = [
    "AgentConfig",
    "ConfigLoadError",
    "ConfigNotResolvedError",
    "ConfigValidationError",
    "LoadedResources",
    "ProjectConfig",
    "ProjectConfigLoader",
    "ProjectError",
    "ProjectRootNotFoundError",
    "RepositoryCreateError",
    "RepositoryFactory",
    "UpdateAction",
    "collect_resources",
    "find_project_root",
    "merge_configs",
]
