"""Skills: named instructions with optional helper scripts."""

from .errors import (
    NoSkillsFoundError,
    SkillAlreadyExistsError,
    SkillNotFoundError,
    SkillParseError,
    SkillReadError,
    SkillRepositoryError,
    SkillValidationError,
)
from .loader import (
    SCRIPT_CONTENT_TYPES,
    SKILLS_KIND,
    SkillDirectoryStrategy,
    SkillLoader,
    load_skills_from_config,
    resolve_content_type,
)
from .models import Script, Skill, SkillMetadata
from .repository import SkillFsRepository, SkillRepository

__all__ = [
    "NoSkillsFoundError",
    "SCRIPT_CONTENT_TYPES",
    "SKILLS_KIND",
    "Script",
    "Skill",
    "SkillAlreadyExistsError",
    "SkillDirectoryStrategy",
    "SkillFsRepository",
    "SkillLoader",
    "SkillMetadata",
    "SkillNotFoundError",
    "SkillParseError",
    "SkillReadError",
    "SkillRepository",
    "SkillValidationError",
    "load_skills_from_config",
    "resolve_content_type",
]
