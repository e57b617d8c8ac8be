"""Project configuration records (``.projectkit.yaml``)."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import Field

from projectkit.ai import AIConfig
from projectkit.doc import DocConfig
from projectkit.resource.models import BaseSchema
from projectkit.rulebook.models import RulebookConfig


class AgentConfig(BaseSchema):
    """A coding agent the project is set up for, with agent-specific options."""

    kind: str = Field(..., min_length=1)
    options: Optional[Any] = None


class ProjectConfig(BaseSchema):
    """
    Project configuration.

    Example::

        agents:
          - kind: claude
        rulebook:
          sources:
            - uri: local://./rulebooks/general
        ai:
          skill:
            sources:
              - uri: local://./skills
    """

    agents: List[AgentConfig] = Field(default_factory=list)
    rulebook: Optional[RulebookConfig] = None
    ai: Optional[AIConfig] = None
    doc: Optional[DocConfig] = None
