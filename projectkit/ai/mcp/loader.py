"""MCP server definition loading.

Every top-level ``.yaml``/``.yml`` file of a source defines one server::

    name: github
    stdio:
      executablePath: /usr/local/bin/github-mcp
      arguments: ["--read-only"]
"""

from __future__ import annotations

from typing import List

from projectkit.fs import FileSystem
from projectkit.resource.aggregator import load_from_sources
from projectkit.resource.kind import ResourceKind
from projectkit.resource.loader import ResourceLoader, YamlFileStrategy
from projectkit.resource.models import SourcesConfig
from projectkit.source.base import Resolver

from .errors import McpServerParseError, McpServerReadError, McpServerValidationError, NoMcpServersFoundError
from .models import MCPServer

MCP_SERVERS_KIND: ResourceKind[MCPServer] = ResourceKind(
    name="mcp servers",
    model=MCPServer,
    read_error=McpServerReadError,
    parse_error=McpServerParseError,
    validation_error=McpServerValidationError,
    not_found_error=NoMcpServersFoundError,
)


class McpServerLoader(ResourceLoader[MCPServer]):
    """Load every MCP server definition of a source filesystem."""

    def __init__(self, fs: FileSystem) -> None:
        super().__init__(fs, YamlFileStrategy(MCP_SERVERS_KIND))


def load_mcp_servers_from_config(config: SourcesConfig, resolver: Resolver) -> List[MCPServer]:
    """Load the MCP servers of every configured source, in order."""
    return load_from_sources(config.uris(), resolver, McpServerLoader, kind="mcp servers")
