"""Rulebook metadata and the loaded rulebook."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from projectkit.ai import AIConfig
from projectkit.ai.instruction.models import Instructions
from projectkit.ai.mcp.models import MCPServer
from projectkit.ai.skill.models import Skill
from projectkit.ai.workflow.models import Workflow
from projectkit.doc import DocConfig
from projectkit.doc.standard.models import Standard
from projectkit.resource.models import BaseSchema, SourcesConfig


class RulebookMetadata(BaseSchema):
    """Content of ``rulebook.yaml``: where the rulebook keeps each resource kind."""

    ai: Optional[AIConfig] = None
    doc: Optional[DocConfig] = None


class RulebookConfig(SourcesConfig):
    """The ``rulebook`` section of a project configuration."""


class AIRulebook(BaseSchema):
    instructions: List[Instructions] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)
    workflows: List[Workflow] = Field(default_factory=list)
    mcp_servers: List[MCPServer] = Field(default_factory=list)


class DocRulebook(BaseSchema):
    standards: List[Standard] = Field(default_factory=list)


class Rulebook(BaseSchema):
    """Every resource a rulebook provides, grouped by area."""

    ai: AIRulebook = Field(default_factory=AIRulebook)
    doc: DocRulebook = Field(default_factory=DocRulebook)
