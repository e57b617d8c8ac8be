"""Error types for MCP server definitions."""

from __future__ import annotations

from projectkit.resource.errors import (
    NoResourcesFoundError,
    RepositoryIOError,
    ResourceParseError,
    ResourceReadError,
    ResourceValidationError,
)

_KIND = "mcp servers"


class McpServerReadError(ResourceReadError):
    kind = _KIND


class McpServerParseError(ResourceParseError):
    kind = _KIND


class McpServerValidationError(ResourceValidationError):
    kind = _KIND


class NoMcpServersFoundError(NoResourcesFoundError):
    kind = _KIND


class McpServerRepositoryError(RepositoryIOError):
    kind = _KIND
