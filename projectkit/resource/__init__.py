"""Generic resource pipeline: discover, parse, validate, aggregate, persist.

The individual resource kinds (``projectkit.ai.*``, ``projectkit.doc.*``)
are thin instantiations of the pieces defined here.
"""

from .aggregator import Loader, load_from_sources
from .errors import (
    NoResourcesFoundError,
    RepositoryIOError,
    ResourceAlreadyExistsError,
    ResourceError,
    ResourceNotFoundError,
    ResourceParseError,
    ResourceReadError,
    ResourceValidationError,
)
from .kind import ResourceKind
from .loader import LoadStrategy, ResourceLoader, YamlFileStrategy, parse_yaml_mapping, validate_record
from .models import BaseSchema, SourceConfig, SourcesConfig
from .repository import FsRepository

__all__ = [
    "BaseSchema",
    "FsRepository",
    "LoadStrategy",
    "Loader",
    "NoResourcesFoundError",
    "RepositoryIOError",
    "ResourceAlreadyExistsError",
    "ResourceError",
    "ResourceKind",
    "ResourceLoader",
    "ResourceNotFoundError",
    "ResourceParseError",
    "ResourceReadError",
    "ResourceValidationError",
    "SourceConfig",
    "SourcesConfig",
    "YamlFileStrategy",
    "load_from_sources",
    "parse_yaml_mapping",
    "validate_record",
]
