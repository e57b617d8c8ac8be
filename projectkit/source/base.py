"""Source resolution protocols.

A *driver* owns one or more URI schemes and turns a ``scheme://...`` URI into
a read-only :class:`~projectkit.fs.FileSystem` scoped to the addressed
subtree. A *driver repository* maps schemes to drivers and a *resolver*
dispatches any URI to the right driver.

Drivers from external packages are plugged in via the
``projectkit.source_drivers`` entry-point group (see
:mod:`projectkit.source.loader`).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from projectkit.fs import FileSystem

SCHEME_SEPARATOR = "://"


@runtime_checkable
class Driver(Protocol):
    """Resolve URIs of the schemes it supports into filesystem views."""

    def get_supported_schemes(self) -> list[str]:
        """Return the fixed set of schemes this driver owns."""
        ...

    def resolve(self, uri: str) -> FileSystem:
        """Return a read-only filesystem for ``uri``.

        The full URI, scheme included, is passed in.
        """
        ...


@runtime_checkable
class DriverRepository(Protocol):
    """Scheme to driver mapping."""

    def register_driver(self, driver: Driver) -> None:
        """Register ``driver`` for all of its schemes, or for none of them."""
        ...

    def get_driver_by_scheme(self, scheme: str) -> Driver:
        """Return the driver registered for ``scheme``."""
        ...


@runtime_checkable
class Resolver(Protocol):
    """Resolve any URI into a filesystem view."""

    def resolve(self, uri: str) -> FileSystem:
        ...
