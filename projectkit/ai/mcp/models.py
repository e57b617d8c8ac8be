"""MCP server definition records."""

from __future__ import annotations

from typing import Dict, List

from pydantic import Field

from projectkit.resource.models import BaseSchema


class STDIOMCPServer(BaseSchema):
    """
    Launch parameters of an MCP server speaking over stdio.

    Attributes:
        executable_path: Program to execute.
        arguments: Command-line arguments passed to the program.
        environment_variables: Extra environment for the process.
    """

    executable_path: str = Field(..., min_length=1)
    arguments: List[str] = Field(default_factory=list)
    environment_variables: Dict[str, str] = Field(default_factory=dict)


class MCPServer(BaseSchema):
    """An MCP server made available to agents."""

    name: str = Field(..., min_length=1)
    stdio: STDIOMCPServer
