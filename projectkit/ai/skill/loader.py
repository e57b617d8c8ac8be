"""Skill loading.

A skill source holds one directory per skill::

    <skill>/
        metadata.yaml      # name, description
        instructions.md    # free text, may be empty
        scripts/           # optional; every file becomes a script

Plain files at the top level of the source are ignored.
"""

from __future__ import annotations

import logging
import posixpath
from typing import Dict, List

from projectkit.fs import FileSystem
from projectkit.resource.aggregator import load_from_sources
from projectkit.resource.kind import ResourceKind
from projectkit.resource.loader import ResourceLoader, parse_yaml_mapping, read_bytes, validate_record
from projectkit.resource.models import SourcesConfig
from projectkit.source.base import Resolver

from .errors import NoSkillsFoundError, SkillParseError, SkillReadError, SkillValidationError
from .models import Script, Skill, SkillMetadata

logger = logging.getLogger(__name__)

METADATA_FILE_NAME = "metadata.yaml"
INSTRUCTIONS_FILE_NAME = "instructions.md"
SCRIPTS_DIR_NAME = "scripts"

DEFAULT_CONTENT_TYPE = "application/octet-stream"

SCRIPT_CONTENT_TYPES: Dict[str, str] = {
    ".sh": "application/x-sh",
    ".bash": "application/x-sh",
    ".zsh": "application/x-sh",
    ".ksh": "application/x-sh",
    ".csh": "application/x-csh",
    ".fish": "application/x-fish",
    ".py": "text/x-python",
    ".rb": "text/x-ruby",
    ".pl": "text/x-perl",
    ".lua": "text/x-lua",
    ".js": "text/javascript",
    ".awk": "text/x-awk",
    ".sed": "text/x-sed",
    ".tcl": "application/x-tcl",
}

SKILLS_KIND: ResourceKind[Skill] = ResourceKind(
    name="skills",
    model=Skill,
    read_error=SkillReadError,
    parse_error=SkillParseError,
    validation_error=SkillValidationError,
    not_found_error=NoSkillsFoundError,
)

# Metadata is validated on its own before the rest of the skill is read.
_METADATA_KIND: ResourceKind[SkillMetadata] = ResourceKind(
    name="skills",
    model=SkillMetadata,
    read_error=SkillReadError,
    parse_error=SkillParseError,
    validation_error=SkillValidationError,
    not_found_error=NoSkillsFoundError,
)


def resolve_content_type(filename: str) -> str:
    """Return the MIME type of a script file, judged by its extension."""
    extension = posixpath.splitext(filename)[1].lower()
    return SCRIPT_CONTENT_TYPES.get(extension, DEFAULT_CONTENT_TYPE)


class SkillDirectoryStrategy:
    """One skill per top-level directory."""

    kind = SKILLS_KIND

    def discover(self, fs: FileSystem) -> List[str]:
        return [entry.name for entry in fs.list_dir(".") if entry.is_dir]

    def load_one(self, fs: FileSystem, path: str) -> Skill:
        metadata_path = posixpath.join(path, METADATA_FILE_NAME)
        document = parse_yaml_mapping(read_bytes(fs, metadata_path, self.kind), metadata_path, self.kind)
        metadata = validate_record(document, metadata_path, _METADATA_KIND)

        instructions_path = posixpath.join(path, INSTRUCTIONS_FILE_NAME)
        try:
            data = fs.read_file(instructions_path)
        except OSError as exc:
            raise SkillReadError(instructions_path) from exc
        # Any content is accepted; undecodable bytes become U+FFFD.
        instructions = data.decode("utf-8", errors="replace")

        scripts = self._load_scripts(fs, path)
        logger.debug("Loaded skill %s from %s with %d scripts", metadata.name, path, len(scripts))
        return Skill(metadata=metadata, instructions=instructions, scripts=scripts)

    def _load_scripts(self, fs: FileSystem, path: str) -> Dict[str, Script]:
        scripts_path = posixpath.join(path, SCRIPTS_DIR_NAME)
        try:
            if not fs.dir_exists(scripts_path):
                return {}
            entries = fs.list_dir(scripts_path)
        except OSError as exc:
            raise SkillReadError(scripts_path) from exc

        scripts: Dict[str, Script] = {}
        for entry in entries:
            if entry.is_dir:
                continue
            content = read_bytes(fs, posixpath.join(scripts_path, entry.name), self.kind)
            scripts[entry.name] = Script(content_type=resolve_content_type(entry.name), content=content)
        return scripts


class SkillLoader(ResourceLoader[Skill]):
    """Load every skill of a source filesystem."""

    def __init__(self, fs: FileSystem) -> None:
        super().__init__(fs, SkillDirectoryStrategy())


def load_skills_from_config(config: SourcesConfig, resolver: Resolver) -> List[Skill]:
    """Load the skills of every configured source, in order."""
    return load_from_sources(config.uris(), resolver, SkillLoader, kind="skills")
