"""Rulebook loading.

A rulebook is a source directory bundling resources of several kinds. Its
``rulebook.yaml`` lists, per kind, where inside the rulebook they live::

    ai:
      skill:
        sources:
          - uri: rulebook://ai/skills
    doc:
      standard:
        sources:
          - uri: rulebook://doc/standards

``rulebook://`` URIs are resolved against the rulebook root, read-only. The
kinds are then loaded with their regular loaders, sources in order.
"""

from __future__ import annotations

import logging
from typing import List

from projectkit.ai.instruction.loader import InstructionLoader
from projectkit.ai.mcp.loader import McpServerLoader
from projectkit.ai.skill.loader import SkillLoader
from projectkit.ai.workflow.loader import WorkflowLoader
from projectkit.core.errors import ProjectKitError
from projectkit.doc.standard.loader import StandardLoader
from projectkit.fs import FileSystem, clean_path, read_only, scoped
from projectkit.resource.aggregator import LoaderFactory, load_from_sources
from projectkit.resource.kind import ResourceKind
from projectkit.resource.loader import parse_yaml_mapping, validate_record
from projectkit.resource.models import SourcesConfig
from projectkit.source.base import SCHEME_SEPARATOR, Resolver
from projectkit.source.errors import EmptyPathError, UnsupportedSchemeError

from .errors import MissingRulebookMetadataError, RulebookParseError, RulebookReadError, RulebookValidationError
from .models import AIRulebook, DocRulebook, Rulebook, RulebookMetadata

logger = logging.getLogger(__name__)

RULEBOOK_FILE_NAME = "rulebook.yaml"
RULEBOOK_SCHEME = "rulebook"

RULEBOOK_METADATA_KIND: ResourceKind[RulebookMetadata] = ResourceKind(
    name="rulebook",
    model=RulebookMetadata,
    read_error=RulebookReadError,
    parse_error=RulebookParseError,
    validation_error=RulebookValidationError,
)


class RulebookResolver:
    """Resolve ``rulebook://<path>`` URIs to read-only views of the rulebook root."""

    def __init__(self, fs: FileSystem) -> None:
        self._fs = fs

    def resolve(self, uri: str) -> FileSystem:
        prefix = f"{RULEBOOK_SCHEME}{SCHEME_SEPARATOR}"
        if not uri.startswith(prefix):
            raise UnsupportedSchemeError(uri)
        path = uri[len(prefix):]
        if not path:
            raise EmptyPathError(uri)
        # Anchored at the rulebook root so ".." can never climb out of it.
        relative = clean_path("/" + path).lstrip("/") or "."
        return read_only(scoped(self._fs, relative))


class RulebookLoader:
    """
    Load a rulebook from its root filesystem.

    Args:
        fs: The rulebook root, usually the result of resolving a rulebook
            source URI.
    """

    def __init__(self, fs: FileSystem) -> None:
        self._fs = fs
        self._resolver = RulebookResolver(fs)

    def load_metadata(self) -> RulebookMetadata:
        """
        Read and validate ``rulebook.yaml``.

        Raises:
            MissingRulebookMetadataError: The file does not exist.
            RulebookReadError: The file exists but cannot be read.
            RulebookParseError: The file is not a YAML mapping.
            RulebookValidationError: The file violates the metadata schema.
        """
        try:
            data = self._fs.read_file(RULEBOOK_FILE_NAME)
        except FileNotFoundError as exc:
            raise MissingRulebookMetadataError(RULEBOOK_FILE_NAME) from exc
        except OSError as exc:
            raise RulebookReadError(RULEBOOK_FILE_NAME) from exc
        document = parse_yaml_mapping(data, RULEBOOK_FILE_NAME, RULEBOOK_METADATA_KIND)
        return validate_record(document, RULEBOOK_FILE_NAME, RULEBOOK_METADATA_KIND)

    def _load_kind(self, config: SourcesConfig | None, loader_factory: LoaderFactory, kind: str) -> list:
        if config is None:
            return []
        return load_from_sources(config.uris(), self._resolver, loader_factory, kind=kind)

    def load(self) -> Rulebook:
        """Load the metadata, then every kind it references."""
        try:
            metadata = self.load_metadata()
        except ProjectKitError as exc:
            raise exc.wrap("load metadata")

        ai = metadata.ai
        doc = metadata.doc
        return Rulebook(
            ai=AIRulebook(
                instructions=self._load_kind(ai and ai.instruction, InstructionLoader, "instructions"),
                skills=self._load_kind(ai and ai.skill, SkillLoader, "skills"),
                workflows=self._load_kind(ai and ai.workflow, WorkflowLoader, "workflows"),
                mcp_servers=self._load_kind(ai and ai.mcp, McpServerLoader, "mcp servers"),
            ),
            doc=DocRulebook(
                standards=self._load_kind(doc and doc.standard, StandardLoader, "standards"),
            ),
        )


def load_rulebooks_from_config(config: SourcesConfig, resolver: Resolver) -> List[Rulebook]:
    """
    Resolve and load every configured rulebook, in order.

    Raises:
        ProjectKitError: The first resolution or load failure, with the
            failing URI added as context.
    """
    rulebooks: List[Rulebook] = []
    for uri in config.uris():
        try:
            fs = resolver.resolve(uri)
        except ProjectKitError as exc:
            raise exc.wrap(f"resolve rulebook uri {uri}")
        try:
            rulebook = RulebookLoader(fs).load()
        except ProjectKitError as exc:
            raise exc.wrap(f"load rulebook {uri}")
        rulebooks.append(rulebook)
        logger.info(
            "Loaded rulebook: uri=%s instructions=%d skills=%d workflows=%d mcp_servers=%d standards=%d",
            uri,
            len(rulebook.ai.instructions),
            len(rulebook.ai.skills),
            len(rulebook.ai.workflows),
            len(rulebook.ai.mcp_servers),
            len(rulebook.doc.standards),
        )
    return rulebooks
