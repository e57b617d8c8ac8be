"""Error types shared by every resource kind.

Each resource kind subclasses these (``InstructionReadError``,
``NoSkillsFoundError`` ...) so callers can match either the precise kind or
the generic stage. Only the ``kind`` label differs between subclasses; the
generic classes also take it per instance.
"""

from __future__ import annotations

from typing import Iterable, Optional

from projectkit.core.errors import ProjectKitError


class ResourceError(ProjectKitError):
    """Base error for resource loading and storage."""

    kind = "resource"

    def _label(self, kind: Optional[str]) -> str:
        if kind:
            self.kind = kind
        return self.kind


class ResourceReadError(ResourceError):
    """Raised when a source file or directory cannot be read.

    The underlying ``OSError`` is available as ``__cause__``.
    """

    def __init__(self, path: str, kind: Optional[str] = None) -> None:
        super().__init__(f"{self._label(kind)}: read failed: '{path}'")
        self.path = path


class ResourceParseError(ResourceError):
    """Raised when a source file is not a well-formed document."""

    def __init__(self, path: str, detail: str = "", kind: Optional[str] = None) -> None:
        message = f"{self._label(kind)}: parse failed: '{path}'"
        super().__init__(f"{message}: {detail}" if detail else message)
        self.path = path


class ResourceValidationError(ResourceError):
    """Raised when a parsed document violates its schema.

    ``violations`` lists every broken constraint as ``"<location>: <message>"``.
    """

    def __init__(self, path: str, violations: Iterable[str] = (), kind: Optional[str] = None) -> None:
        self.violations = list(violations)
        message = f"{self._label(kind)}: validation failed: '{path}'"
        if self.violations:
            message = f"{message}: {'; '.join(self.violations)}"
        super().__init__(message)
        self.path = path


class NoResourcesFoundError(ResourceError):
    """Raised when a source holds no resources of the expected kind."""

    def __init__(self, kind: Optional[str] = None) -> None:
        super().__init__(f"no {self._label(kind)} found")


class ResourceNotFoundError(ResourceError):
    """Raised when a repository lookup has no match."""

    def __init__(self, identity: str) -> None:
        super().__init__(f"{self.kind} '{identity}' not found")
        self.identity = identity


class ResourceAlreadyExistsError(ResourceError):
    """Raised when adding a resource whose identity is already stored."""

    def __init__(self, identity: str) -> None:
        super().__init__(f"{self.kind} '{identity}' already exists")
        self.identity = identity


class RepositoryIOError(ResourceError):
    """Raised when a repository file operation fails.

    The underlying exception is available as ``__cause__``.
    """

    def __init__(self, operation: str, filename: str) -> None:
        super().__init__(f"{self.kind} repository: {operation} '{filename}' failed")
        self.operation = operation
        self.filename = filename
