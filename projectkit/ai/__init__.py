"""AI resource kinds: instructions, skills, MCP servers and workflows."""

from projectkit.resource.models import BaseSchema, SourcesConfig

from .instruction.models import Instructions
from .mcp.models import MCPServer
from .skill.models import Skill
from .workflow.models import Workflow


class AIConfig(BaseSchema):
    """The ``ai`` section of a project or rulebook configuration."""

    instruction: SourcesConfig | None = None
    skill: SourcesConfig | None = None
    workflow: SourcesConfig | None = None
    mcp: SourcesConfig | None = None


__all__ = [
    "AIConfig",
    "Instructions",
    "MCPServer",
    "Skill",
    "Workflow",
]
