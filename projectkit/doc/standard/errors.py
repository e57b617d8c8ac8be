"""Error types for documentation standards."""

from __future__ import annotations

from projectkit.resource.errors import (
    NoResourcesFoundError,
    RepositoryIOError,
    ResourceParseError,
    ResourceReadError,
    ResourceValidationError,
)

_KIND = "standards"


class StandardReadError(ResourceReadError):
    kind = _KIND


class StandardParseError(ResourceParseError):
    kind = _KIND


class StandardValidationError(ResourceValidationError):
    kind = _KIND


class NoStandardsFoundError(NoResourcesFoundError):
    kind = _KIND


class StandardRepositoryError(RepositoryIOError):
    kind = _KIND
