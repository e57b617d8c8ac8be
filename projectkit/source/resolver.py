"""URI resolver dispatching to registered drivers."""

from __future__ import annotations

import logging

from projectkit.core.errors import ProjectKitError
from projectkit.fs import FileSystem

from .base import SCHEME_SEPARATOR, DriverRepository
from .errors import SourceResolveError, UriSchemeNotFoundError

logger = logging.getLogger(__name__)


def split_scheme(uri: str) -> str:
    """Return the scheme of ``uri``: everything before the first ``://``.

    Raises:
        UriSchemeNotFoundError: If ``uri`` contains no ``://``.
    """
    scheme, separator, _ = uri.partition(SCHEME_SEPARATOR)
    if not separator:
        raise UriSchemeNotFoundError(uri)
    return scheme


class SourceResolver:
    """
    Resolve URIs by looking up the driver that owns their scheme.

    Only the first ``://`` decides the scheme; the driver always receives the
    original URI unmodified.
    """

    def __init__(self, driver_repository: DriverRepository) -> None:
        self._drivers = driver_repository

    def resolve(self, uri: str) -> FileSystem:
        """
        Resolve ``uri`` into a read-only filesystem view.

        Raises:
            UriSchemeNotFoundError: If ``uri`` has no scheme separator.
            SchemeDriverNotRegisteredError: If no driver owns the scheme.
            SourceError: Whatever the driver raised, with the URI as context.
        """
        scheme = split_scheme(uri)

        try:
            driver = self._drivers.get_driver_by_scheme(scheme)
        except ProjectKitError as exc:
            raise exc.wrap("get driver by scheme")

        try:
            fs = driver.resolve(uri)
        except ProjectKitError as exc:
            raise exc.wrap(f"resolve {uri}")
        except OSError as exc:
            raise SourceResolveError(uri) from exc

        logger.debug("Resolved %s with %s", uri, type(driver).__name__)
        return fs
