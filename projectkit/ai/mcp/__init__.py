"""MCP server definitions."""

from .errors import (
    McpServerParseError,
    McpServerReadError,
    McpServerRepositoryError,
    McpServerValidationError,
    NoMcpServersFoundError,
)
from .loader import MCP_SERVERS_KIND, McpServerLoader, load_mcp_servers_from_config
from .models import MCPServer, STDIOMCPServer
from .repository import McpServerFsRepository, McpServerRepository

__all__ = [
    "MCPServer",
    "McpServerFsRepository",
    "McpServerLoader",
    "McpServerParseError",
    "McpServerReadError",
    "McpServerRepository",
    "McpServerRepositoryError",
    "McpServerValidationError",
    "MCP_SERVERS_KIND",
    "NoMcpServersFoundError",
    "STDIOMCPServer",
    "load_mcp_servers_from_config",
]
