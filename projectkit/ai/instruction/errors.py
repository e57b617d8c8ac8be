"""Error types for instruction sets."""

from __future__ import annotations

from projectkit.resource.errors import (
    NoResourcesFoundError,
    RepositoryIOError,
    ResourceParseError,
    ResourceReadError,
    ResourceValidationError,
)

_KIND = "instructions"


class InstructionReadError(ResourceReadError):
    kind = _KIND


class InstructionParseError(ResourceParseError):
    kind = _KIND


class InstructionValidationError(ResourceValidationError):
    kind = _KIND


class NoInstructionsFoundError(NoResourcesFoundError):
    kind = _KIND


class InstructionRepositoryError(RepositoryIOError):
    kind = _KIND
