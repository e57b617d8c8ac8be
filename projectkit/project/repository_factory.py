"""Repositories of a project, stored under the project root."""

from __future__ import annotations

import logging
import posixpath
from typing import Optional

from projectkit.ai.instruction.repository import InstructionFsRepository
from projectkit.ai.mcp.repository import McpServerFsRepository
from projectkit.ai.skill.repository import SkillFsRepository
from projectkit.ai.workflow.repository import WorkflowFsRepository
from projectkit.core.config import get_settings
from projectkit.doc.standard.repository import StandardFsRepository
from projectkit.fs import FileSystem, scoped

from .errors import RepositoryCreateError

logger = logging.getLogger(__name__)

SKILL_DIR = "ai/skill"
MCP_DIR = "ai/mcp"
INSTRUCTION_DIR = "ai/instruction"
WORKFLOW_DIR = "ai/workflow/workflows"
EXECUTION_DIR = "ai/workflow/executions"
STANDARD_DIR = "doc/standard"


class RepositoryFactory:
    """
    Create the filesystem repositories of a project.

    Each repository owns one directory below ``base_dir``, created on first
    use.

    Args:
        project_fs: The project root filesystem.
        base_dir: Project-relative directory of the repositories. Defaults to
            the ``PROJECTKIT_REPOSITORY_DIR`` setting.
    """

    def __init__(self, project_fs: FileSystem, base_dir: Optional[str] = None) -> None:
        self._project_fs = project_fs
        self._base_dir = base_dir or get_settings().repository_dir

    def _directory(self, relative: str) -> FileSystem:
        path = posixpath.join(self._base_dir, relative)
        try:
            self._project_fs.make_dirs(path)
        except OSError as exc:
            raise RepositoryCreateError(path) from exc
        logger.debug("Using repository directory %s", path)
        return scoped(self._project_fs, path)

    def skill_repository(self) -> SkillFsRepository:
        return SkillFsRepository(self._directory(SKILL_DIR))

    def mcp_server_repository(self) -> McpServerFsRepository:
        return McpServerFsRepository(self._directory(MCP_DIR))

    def instruction_repository(self) -> InstructionFsRepository:
        return InstructionFsRepository(self._directory(INSTRUCTION_DIR))

    def workflow_repository(self) -> WorkflowFsRepository:
        return WorkflowFsRepository(self._directory(WORKFLOW_DIR), self._directory(EXECUTION_DIR))

    def standard_repository(self) -> StandardFsRepository:
        return StandardFsRepository(self._directory(STANDARD_DIR))
