"""Error types for skills."""

from __future__ import annotations

from projectkit.resource.errors import (
    NoResourcesFoundError,
    RepositoryIOError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
    ResourceParseError,
    ResourceReadError,
    ResourceValidationError,
)

_KIND = "skills"


class SkillReadError(ResourceReadError):
    kind = _KIND


class SkillParseError(ResourceParseError):
    kind = _KIND


class SkillValidationError(ResourceValidationError):
    kind = _KIND


class NoSkillsFoundError(NoResourcesFoundError):
    kind = _KIND


class SkillAlreadyExistsError(ResourceAlreadyExistsError):
    kind = "skill"


class SkillNotFoundError(ResourceNotFoundError):
    kind = "skill"


class SkillRepositoryError(RepositoryIOError):
    kind = _KIND
