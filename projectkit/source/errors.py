"""Error types for source resolution.

Defines the errors raised by the driver registry, the resolver and the
built-in drivers.
"""

from __future__ import annotations

from projectkit.core.errors import ProjectKitError


class SourceError(ProjectKitError):
    """Base error for all source resolution failures."""


class UriSchemeNotFoundError(SourceError):
    """Raised when a URI carries no ``://`` separator."""

    def __init__(self, uri: str) -> None:
        super().__init__(f"uri scheme not found: '{uri}'")
        self.uri = uri


class SchemeDriverNotRegisteredError(SourceError):
    """Raised when no driver is registered for a scheme."""

    def __init__(self, scheme: str) -> None:
        super().__init__(f"scheme '{scheme}': scheme driver not registered")
        self.scheme = scheme


class SchemeDriverAlreadyRegisteredError(SourceError):
    """Raised when a driver claims a scheme that is already taken."""

    def __init__(self, scheme: str) -> None:
        super().__init__(f"scheme '{scheme}': scheme driver already registered")
        self.scheme = scheme


class UnsupportedSchemeError(SourceError):
    """Raised by a driver asked to resolve a URI whose scheme it does not own."""

    def __init__(self, uri: str) -> None:
        super().__init__(f"uri '{uri}': unsupported scheme")
        self.uri = uri


class EmptyPathError(SourceError):
    """Raised when a URI has nothing after its scheme separator."""

    def __init__(self, uri: str) -> None:
        super().__init__(f"empty path in uri '{uri}'")
        self.uri = uri


class PathNotFoundError(SourceError):
    """Raised when a URI points at a directory that does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"path '{path}' does not exist")
        self.path = path


class PathCheckError(SourceError):
    """Raised when checking a path for existence fails.

    The underlying ``OSError`` is available as ``__cause__``.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"checking path '{path}' failed")
        self.path = path


class SourceResolveError(SourceError):
    """Raised when a driver fails with a non-ProjectKit exception.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, uri: str) -> None:
        super().__init__(f"resolve '{uri}' failed")
        self.uri = uri
