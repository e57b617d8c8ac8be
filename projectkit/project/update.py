"""Synchronize the project repositories with the configured sources.

Every resource kind is first loaded from the sources named directly in the
project configuration, then from each configured rulebook. Only once every
source has loaded are the repositories replaced, kind by kind: a failing
source leaves the repositories untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TypeVar

from projectkit.ai.instruction.loader import load_instructions_from_config
from projectkit.ai.instruction.models import Instructions
from projectkit.ai.instruction.repository import InstructionRepository
from projectkit.ai.mcp.loader import load_mcp_servers_from_config
from projectkit.ai.mcp.models import MCPServer
from projectkit.ai.mcp.repository import McpServerRepository
from projectkit.ai.skill.loader import load_skills_from_config
from projectkit.ai.skill.models import Skill
from projectkit.ai.skill.repository import SkillRepository
from projectkit.ai.workflow.loader import load_workflows_from_config
from projectkit.ai.workflow.models import Workflow
from projectkit.ai.workflow.repository import WorkflowRepository
from projectkit.core.errors import ProjectKitError
from projectkit.doc.standard.loader import load_standards_from_config
from projectkit.doc.standard.models import Standard
from projectkit.doc.standard.repository import StandardRepository
from projectkit.resource.models import SourcesConfig
from projectkit.rulebook.loader import load_rulebooks_from_config
from projectkit.source.base import Resolver

from .models import ProjectConfig
from .repository_factory import RepositoryFactory

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class LoadedResources:
    """Resources collected from every source of a project."""

    instructions: List[Instructions] = field(default_factory=list)
    skills: List[Skill] = field(default_factory=list)
    workflows: List[Workflow] = field(default_factory=list)
    mcp_servers: List[MCPServer] = field(default_factory=list)
    standards: List[Standard] = field(default_factory=list)


def _load(
    config: Optional[SourcesConfig],
    resolver: Resolver,
    load_fn: Callable[[SourcesConfig, Resolver], List[T]],
    kind: str,
) -> List[T]:
    if config is None:
        return []
    try:
        return load_fn(config, resolver)
    except ProjectKitError as exc:
        raise exc.wrap(f"load {kind} from config")


def collect_resources(config: ProjectConfig, resolver: Resolver) -> LoadedResources:
    """Load every resource named by ``config``, direct sources before rulebooks."""
    ai = config.ai
    doc = config.doc
    resources = LoadedResources(
        instructions=_load(ai and ai.instruction, resolver, load_instructions_from_config, "instructions"),
        skills=_load(ai and ai.skill, resolver, load_skills_from_config, "skills"),
        workflows=_load(ai and ai.workflow, resolver, load_workflows_from_config, "workflows"),
        mcp_servers=_load(ai and ai.mcp, resolver, load_mcp_servers_from_config, "mcp servers"),
        standards=_load(doc and doc.standard, resolver, load_standards_from_config, "standards"),
    )
    for rulebook in _load(config.rulebook, resolver, load_rulebooks_from_config, "rulebooks"):
        resources.instructions.extend(rulebook.ai.instructions)
        resources.skills.extend(rulebook.ai.skills)
        resources.workflows.extend(rulebook.ai.workflows)
        resources.mcp_servers.extend(rulebook.ai.mcp_servers)
        resources.standards.extend(rulebook.doc.standards)
    return resources


class UpdateAction:
    """
    Replace the content of the project repositories with freshly loaded resources.

    Args:
        config: The merged project configuration.
        resolver: Resolver for the configured source URIs.
        instruction_repository: Target for instruction sets.
        skill_repository: Target for skills.
        workflow_repository: Target for workflows.
        mcp_server_repository: Target for MCP servers.
        standard_repository: Target for documentation standards.
    """

    def __init__(
        self,
        config: ProjectConfig,
        resolver: Resolver,
        instruction_repository: InstructionRepository,
        skill_repository: SkillRepository,
        workflow_repository: WorkflowRepository,
        mcp_server_repository: McpServerRepository,
        standard_repository: StandardRepository,
    ) -> None:
        self._config = config
        self._resolver = resolver
        self._instruction_repository = instruction_repository
        self._skill_repository = skill_repository
        self._workflow_repository = workflow_repository
        self._mcp_server_repository = mcp_server_repository
        self._standard_repository = standard_repository

    @classmethod
    def from_factory(cls, config: ProjectConfig, resolver: Resolver, factory: RepositoryFactory) -> "UpdateAction":
        """Build an action writing to the repositories of ``factory``."""
        return cls(
            config,
            resolver,
            instruction_repository=factory.instruction_repository(),
            skill_repository=factory.skill_repository(),
            workflow_repository=factory.workflow_repository(),
            mcp_server_repository=factory.mcp_server_repository(),
            standard_repository=factory.standard_repository(),
        )

    def run(self) -> LoadedResources:
        """
        Load every resource, then replace each repository's content.

        Returns:
            The resources that were stored.

        Raises:
            ProjectKitError: Loading or storing failed. A load failure leaves
                every repository untouched.
        """
        resources = collect_resources(self._config, self._resolver)

        self._standard_repository.remove_all()
        for standard in resources.standards:
            self._standard_repository.add_standard(standard)
        logger.info("Standards added to repository: count=%d", len(resources.standards))

        self._instruction_repository.remove_all()
        for instructions in resources.instructions:
            self._instruction_repository.add_instructions(instructions)
        logger.info("Instructions added to repository: count=%d", len(resources.instructions))

        self._skill_repository.remove_all()
        for skill in resources.skills:
            self._skill_repository.add_skill(skill)
        logger.info("Skills added to repository: count=%d", len(resources.skills))

        self._workflow_repository.remove_all()
        for workflow in resources.workflows:
            self._workflow_repository.add_workflow(workflow)
        logger.info("Workflows added to repository: count=%d", len(resources.workflows))

        self._mcp_server_repository.remove_all()
        for server in resources.mcp_servers:
            self._mcp_server_repository.add_mcp_server(server)
        logger.info("MCP servers added to repository: count=%d", len(resources.mcp_servers))

        return resources
