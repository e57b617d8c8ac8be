"""Workflow loading: one workflow per top-level YAML file of a source."""

from __future__ import annotations

from typing import List

from projectkit.fs import FileSystem
from projectkit.resource.aggregator import load_from_sources
from projectkit.resource.kind import ResourceKind
from projectkit.resource.loader import ResourceLoader, YamlFileStrategy
from projectkit.resource.models import SourcesConfig
from projectkit.source.base import Resolver

from .errors import NoWorkflowsFoundError, WorkflowParseError, WorkflowReadError, WorkflowValidationError
from .models import Workflow

WORKFLOWS_KIND: ResourceKind[Workflow] = ResourceKind(
    name="workflows",
    model=Workflow,
    read_error=WorkflowReadError,
    parse_error=WorkflowParseError,
    validation_error=WorkflowValidationError,
    not_found_error=NoWorkflowsFoundError,
)


class WorkflowLoader(ResourceLoader[Workflow]):
    def __init__(self, fs: FileSystem) -> None:
        super().__init__(fs, YamlFileStrategy(WORKFLOWS_KIND))


def load_workflows_from_config(config: SourcesConfig, resolver: Resolver) -> List[Workflow]:
    """Load the workflows of every configured source, in order."""
    return load_from_sources(config.uris(), resolver, WorkflowLoader, kind="workflows")
