"""Documentation standard loading: one standard per top-level YAML file."""

from __future__ import annotations

from typing import List

from projectkit.fs import FileSystem
from projectkit.resource.aggregator import load_from_sources
from projectkit.resource.kind import ResourceKind
from projectkit.resource.loader import ResourceLoader, YamlFileStrategy
from projectkit.resource.models import SourcesConfig
from projectkit.source.base import Resolver

from .errors import NoStandardsFoundError, StandardParseError, StandardReadError, StandardValidationError
from .models import Standard

STANDARDS_KIND: ResourceKind[Standard] = ResourceKind(
    name="standards",
    model=Standard,
    read_error=StandardReadError,
    parse_error=StandardParseError,
    validation_error=StandardValidationError,
    not_found_error=NoStandardsFoundError,
)


class StandardLoader(ResourceLoader[Standard]):
    def __init__(self, fs: FileSystem) -> None:
        super().__init__(fs, YamlFileStrategy(STANDARDS_KIND))


def load_standards_from_config(config: SourcesConfig, resolver: Resolver) -> List[Standard]:
    """Load the standards of every configured source, in order."""
    return load_from_sources(config.uris(), resolver, StandardLoader, kind="standards")
