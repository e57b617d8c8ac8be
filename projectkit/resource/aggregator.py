"""Config-driven aggregation of resources across sources.

For one resource kind, each configured source URI is resolved and loaded in
order and the results are concatenated. The first failing source aborts the
whole aggregation: later sources are never resolved and no partial list is
returned. An empty source list is not an error and yields an empty list.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Protocol, TypeVar

from projectkit.core.errors import ProjectKitError
from projectkit.fs import FileSystem
from projectkit.source.base import Resolver

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Loader(Protocol[T_co]):
    """Anything with a ``load()`` returning a list of resources."""

    def load(self) -> List[T_co]:
        ...


LoaderFactory = Callable[[FileSystem], Loader[T]]


def load_from_sources(
    uris: Iterable[str],
    resolver: Resolver,
    loader_factory: LoaderFactory[T],
    *,
    kind: str = "resources",
) -> List[T]:
    """
    Resolve and load every source URI, preserving source order.

    Args:
        uris: Source URIs, in the order their resources should appear.
        resolver: Resolver turning each URI into a filesystem.
        loader_factory: Builds the kind's loader for a resolved filesystem.
        kind: Label used in log lines and error context.

    Returns:
        The concatenated resources of all sources.

    Raises:
        ProjectKitError: The first resolution or load failure, with the
            failing URI added as context. Its class is unchanged.
    """
    resources: List[T] = []
    for uri in uris:
        try:
            fs = resolver.resolve(uri)
        except ProjectKitError as exc:
            raise exc.wrap(f"resolve {kind} source {uri}")
        try:
            loaded = loader_factory(fs).load()
        except ProjectKitError as exc:
            raise exc.wrap(f"load {kind} from {uri}")
        resources.extend(loaded)
        logger.info("Loaded %s from source: uri=%s count=%d", kind, uri, len(loaded))
    return resources
