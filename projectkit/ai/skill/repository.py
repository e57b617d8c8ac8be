"""Skill repository.

Skill names are unique: adding a skill whose name is already stored fails
and leaves the repository unchanged.
"""

from __future__ import annotations

from typing import List, Protocol

from projectkit.resource.repository import FsRepository

from .errors import SkillAlreadyExistsError, SkillNotFoundError, SkillRepositoryError
from .models import Skill


class SkillRepository(Protocol):
    """Access to stored skills."""

    def get_all(self) -> List[Skill]:
        ...

    def get_skill_by_name(self, name: str) -> Skill:
        ...

    def add_skill(self, skill: Skill) -> None:
        ...

    def remove_all(self) -> None:
        ...


class SkillFsRepository(FsRepository[Skill]):
    """Skills stored one JSON file each, listed by name."""

    model = Skill
    io_error = SkillRepositoryError

    def identity(self, resource: Skill) -> str:
        return resource.metadata.name

    def add_skill(self, skill: Skill) -> None:
        """
        Store ``skill``.

        Raises:
            SkillAlreadyExistsError: A skill with the same name is stored.
            SkillRepositoryError: The repository directory cannot be read or written.
        """
        self._add(skill, duplicate_error=SkillAlreadyExistsError)

    def get_skill_by_name(self, name: str) -> Skill:
        """
        Return the stored skill called ``name``.

        Raises:
            SkillNotFoundError: No stored skill has that name.
        """
        with self._lock.read_locked():
            skill = self._find(lambda existing: existing.metadata.name == name)
        if skill is None:
            raise SkillNotFoundError(name)
        return skill
