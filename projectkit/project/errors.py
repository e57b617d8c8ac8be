"""Error types for project configuration and layout."""

from __future__ import annotations

from typing import Iterable

from projectkit.core.errors import ProjectKitError


class ProjectError(ProjectKitError):
    """Base error for project configuration and layout."""


class ConfigNotResolvedError(ProjectError):
    """Raised when no configuration file exists in the home or working directory."""

    def __init__(self, candidates: Iterable[str] = ()) -> None:
        self.candidates = list(candidates)
        message = "config not found"
        if self.candidates:
            message = f"{message}: looked in {', '.join(self.candidates)}"
        super().__init__(message)


class ConfigLoadError(ProjectError):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, path: str, detail: str = "") -> None:
        message = f"config load failed: '{path}'"
        super().__init__(f"{message}: {detail}" if detail else message)
        self.path = path


class ConfigValidationError(ProjectError):
    """Raised when a configuration file violates the configuration schema."""

    def __init__(self, path: str, violations: Iterable[str] = ()) -> None:
        self.violations = list(violations)
        message = f"config validation failed: '{path}'"
        if self.violations:
            message = f"{message}: {'; '.join(self.violations)}"
        super().__init__(message)
        self.path = path


class ProjectRootNotFoundError(ProjectError):
    """Raised when no directory above the start directory looks like a project root."""

    def __init__(self, start_dir: str) -> None:
        super().__init__(f"project root path not found from '{start_dir}'")
        self.start_dir = start_dir


class RepositoryCreateError(ProjectError):
    """Raised when a repository directory cannot be created."""

    def __init__(self, path: str) -> None:
        super().__init__(f"repository directory creation failed: '{path}'")
        self.path = path
