"""Source resolution: drivers, the driver registry and the resolver.

Typical usage::

    registry = new_default_registry()
    resolver = SourceResolver(registry)
    fs = resolver.resolve("local://./rulebooks/general")
"""

from .base import Driver, DriverRepository, Resolver
from .errors import (
    EmptyPathError,
    PathCheckError,
    PathNotFoundError,
    SchemeDriverAlreadyRegisteredError,
    SchemeDriverNotRegisteredError,
    SourceError,
    SourceResolveError,
    UnsupportedSchemeError,
    UriSchemeNotFoundError,
)
from .loader import load_drivers_from_entry_points, new_default_registry
from .local_driver import LOCAL_SCHEME, LocalDriver
from .registry import DriverRegistry
from .resolver import SourceResolver, split_scheme

__all__ = [
    "Driver",
    "DriverRegistry",
    "DriverRepository",
    "EmptyPathError",
    "LOCAL_SCHEME",
    "LocalDriver",
    "PathCheckError",
    "PathNotFoundError",
    "Resolver",
    "SchemeDriverAlreadyRegisteredError",
    "SchemeDriverNotRegisteredError",
    "SourceError",
    "SourceResolveError",
    "SourceResolver",
    "UnsupportedSchemeError",
    "UriSchemeNotFoundError",
    "load_drivers_from_entry_points",
    "new_default_registry",
    "split_scheme",
]
