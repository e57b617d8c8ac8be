"""Generic resource loader.

Every resource kind is loaded with the same skeleton:

1. *Discover* candidate entries at the top level of the source filesystem.
2. *Load* each entry: read it, parse it, validate it into the kind's record.
3. Fail with the kind's "none found" error when nothing was loaded.

What differs between kinds is captured by a :class:`LoadStrategy`:

* :class:`YamlFileStrategy` – one resource per ``.yaml``/``.yml`` file
  (instructions, MCP servers, workflows, documentation standards).
* :class:`~projectkit.ai.skill.loader.SkillDirectoryStrategy` – one resource
  per directory (skills).

Discovery order is the listing order of the filesystem. The first failing
entry aborts the whole load; nothing loaded before it is returned.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Generic, List, Protocol, Sequence, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from projectkit.fs import FileSystem

from .kind import ResourceKind

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

YAML_EXTENSIONS = (".yaml", ".yml")


class LoadStrategy(Protocol[T]):
    """Discovery and per-entry loading for one resource kind."""

    kind: ResourceKind[T]

    def discover(self, fs: FileSystem) -> List[str]:
        """Return the entries of ``fs`` that hold one resource each."""
        ...

    def load_one(self, fs: FileSystem, path: str) -> T:
        """Read, parse and validate the resource stored at ``path``."""
        ...


def has_extension(name: str, extensions: Sequence[str]) -> bool:
    """Return whether ``name`` ends with one of ``extensions`` (case-insensitive).

    A bare ``.yaml`` counts: the whole name is its extension.
    """
    return name.lower().endswith(tuple(extensions))


def read_bytes(fs: FileSystem, path: str, kind: ResourceKind[Any]) -> bytes:
    """Read ``path`` from ``fs``, raising the kind's read error on failure."""
    try:
        return fs.read_file(path)
    except OSError as exc:
        raise kind.read_error(path, kind=kind.name) from exc


def parse_yaml_mapping(data: bytes, path: str, kind: ResourceKind[Any]) -> Dict[str, Any]:
    """
    Parse ``data`` as a YAML mapping.

    An empty document parses to an empty mapping.

    Raises:
        ResourceParseError: The kind's parse error for malformed YAML or a
            document that is not a mapping.
    """
    try:
        document = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise kind.parse_error(path, str(exc).splitlines()[0] if str(exc) else "", kind=kind.name) from exc
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise kind.parse_error(path, "document must be a mapping", kind=kind.name)
    return document


def format_violations(exc: ValidationError) -> list[str]:
    """Render pydantic errors as ``"<dotted.location>: <message>"`` strings."""
    violations = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        violations.append(f"{location}: {error['msg']}")
    return violations


def validate_record(data: Any, path: str, kind: ResourceKind[T]) -> T:
    """
    Validate ``data`` into the kind's record model.

    Raises:
        ResourceValidationError: The kind's validation error, listing every
            violated constraint.
    """
    try:
        return kind.model.model_validate(data)
    except ValidationError as exc:
        raise kind.validation_error(path, format_violations(exc), kind=kind.name) from exc


class YamlFileStrategy(Generic[T]):
    """One resource per top-level YAML file; directories are ignored."""

    def __init__(self, kind: ResourceKind[T], extensions: Sequence[str] = YAML_EXTENSIONS) -> None:
        self.kind = kind
        self._extensions = tuple(ext.lower() for ext in extensions)

    def discover(self, fs: FileSystem) -> List[str]:
        return [
            entry.name
            for entry in fs.list_dir(".")
            if not entry.is_dir and has_extension(entry.name, self._extensions)
        ]

    def load_one(self, fs: FileSystem, path: str) -> T:
        data = read_bytes(fs, path, self.kind)
        document = parse_yaml_mapping(data, path, self.kind)
        return validate_record(document, path, self.kind)


class ResourceLoader(Generic[T]):
    """
    Load every resource of one kind from a source filesystem.

    Args:
        fs: The (usually read-only, scoped) source filesystem.
        strategy: Discovery and per-entry loading for the kind.
    """

    def __init__(self, fs: FileSystem, strategy: LoadStrategy[T]) -> None:
        self._fs = fs
        self._strategy = strategy

    @property
    def kind(self) -> ResourceKind[T]:
        return self._strategy.kind

    def load(self) -> List[T]:
        """
        Load all resources.

        Returns:
            The resources, in discovery order. Never empty.

        Raises:
            ResourceReadError: The source or one of its entries cannot be read.
            ResourceParseError: An entry is malformed.
            ResourceValidationError: An entry violates the kind's schema.
            NoResourcesFoundError: The source holds no entries of the kind.
        """
        kind = self.kind
        try:
            paths = self._strategy.discover(self._fs)
        except OSError as exc:
            raise kind.read_error(".", kind=kind.name).wrap("read directory") from exc

        resources: List[T] = []
        for path in paths:
            resources.append(self._strategy.load_one(self._fs, path))

        if not resources:
            raise kind.not_found_error(kind=kind.name)

        logger.debug("Loaded %d %s", len(resources), kind.name)
        return resources
