"""MCP server repository.

Server names are not required to be unique; every add writes a new file.
"""

from __future__ import annotations

from typing import List, Protocol

from projectkit.resource.repository import FsRepository

from .errors import McpServerRepositoryError
from .models import MCPServer


class McpServerRepository(Protocol):
    """Access to stored MCP server definitions."""

    def get_all(self) -> List[MCPServer]:
        ...

    def add_mcp_server(self, server: MCPServer) -> None:
        ...

    def remove_all(self) -> None:
        ...


class McpServerFsRepository(FsRepository[MCPServer]):
    """MCP servers stored one JSON file each, listed by name."""

    model = MCPServer
    io_error = McpServerRepositoryError

    def identity(self, resource: MCPServer) -> str:
        return resource.name

    def add_mcp_server(self, server: MCPServer) -> None:
        self._add(server)
