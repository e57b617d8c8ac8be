"""Error types for rulebooks."""

from __future__ import annotations

from projectkit.resource.errors import (
    ResourceError,
    ResourceParseError,
    ResourceReadError,
    ResourceValidationError,
)

_KIND = "rulebook"


class RulebookError(ResourceError):
    kind = _KIND


class MissingRulebookMetadataError(RulebookError):
    """Raised when a rulebook source has no ``rulebook.yaml``."""

    def __init__(self, path: str) -> None:
        super().__init__(f"missing metadata file: '{path}'")
        self.path = path


class RulebookReadError(ResourceReadError, RulebookError):
    kind = _KIND


class RulebookParseError(ResourceParseError, RulebookError):
    kind = _KIND


class RulebookValidationError(ResourceValidationError, RulebookError):
    kind = _KIND
