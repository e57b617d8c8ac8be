"""Instruction set loading.

Every top-level ``.yaml``/``.yml`` file of a source holds one instruction
set::

    category: git
    rules:
      - Write commit messages in the imperative mood.
"""

from __future__ import annotations

from typing import List

from projectkit.fs import FileSystem
from projectkit.resource.aggregator import load_from_sources
from projectkit.resource.kind import ResourceKind
from projectkit.resource.loader import ResourceLoader, YamlFileStrategy
from projectkit.resource.models import SourcesConfig
from projectkit.source.base import Resolver

from .errors import (
    InstructionParseError,
    InstructionReadError,
    InstructionValidationError,
    NoInstructionsFoundError,
)
from .models import Instructions

INSTRUCTIONS_KIND: ResourceKind[Instructions] = ResourceKind(
    name="instructions",
    model=Instructions,
    read_error=InstructionReadError,
    parse_error=InstructionParseError,
    validation_error=InstructionValidationError,
    not_found_error=NoInstructionsFoundError,
)


class InstructionLoader(ResourceLoader[Instructions]):
    """Load every instruction set of a source filesystem."""

    def __init__(self, fs: FileSystem) -> None:
        super().__init__(fs, YamlFileStrategy(INSTRUCTIONS_KIND))


def load_instructions_from_config(config: SourcesConfig, resolver: Resolver) -> List[Instructions]:
    """Load the instruction sets of every configured source, in order."""
    return load_from_sources(config.uris(), resolver, InstructionLoader, kind="instructions")
