"""Source driver loader utilities.

External packages contribute drivers by advertising a factory in the
``projectkit.source_drivers`` entry-point group (the group name can be
changed with ``PROJECTKIT_DRIVER_ENTRY_POINT_GROUP``). Each factory is called
without arguments and must return an object conforming to
:class:`~projectkit.source.base.Driver`.

The loader tolerates broken plugins: an entry point that
fails to import, fails to build, or builds something that is not a driver is
skipped with a warning naming only the entry point and the exception type.
Scheme conflicts are not a plugin defect; they propagate to the caller.
"""

from __future__ import annotations

import logging
from importlib import metadata
from typing import Iterable, Optional

from .base import Driver, DriverRepository
from .local_driver import LocalDriver
from .registry import DriverRegistry

_LOGGER = logging.getLogger(__name__)


def _iter_entry_points(group: str) -> Iterable[metadata.EntryPoint]:
    """Return entry points for ``group``.

    The function is also used as an indirection point in tests so that
    behavior can be controlled without relying on the real environment.
    """
    return metadata.entry_points().select(group=group)


def load_drivers_from_entry_points(registry: DriverRepository, group: Optional[str] = None) -> list[Driver]:
    """
    Register every driver advertised under ``group`` into ``registry``.

    Args:
        registry: The driver repository to populate.
        group: Entry-point group; defaults to the configured group.

    Returns:
        The drivers that were registered, in discovery order.

    Raises:
        SchemeDriverAlreadyRegisteredError: If a discovered driver claims a
            scheme that is already registered.
    """
    if group is None:
        from projectkit.core.config import get_settings

        group = get_settings().driver_entry_point_group

    registered: list[Driver] = []
    for ep in _iter_entry_points(group):
        try:
            factory = ep.load()
            driver = factory()
        except Exception as exc:  # noqa: BLE001 - third-party plugin code
            _LOGGER.warning(
                "SourceDriverLoader: failed to load driver; entry_point=%s error=%s",
                ep.name,
                type(exc).__name__,
            )
            continue
        if not isinstance(driver, Driver):
            _LOGGER.warning("SourceDriverLoader: entry point %s did not return a Driver; skipping", ep.name)
            continue
        registry.register_driver(driver)
        registered.append(driver)
        _LOGGER.info("SourceDriverLoader: registered driver from entry point %s", ep.name)
    return registered


def new_default_registry(*, load_entry_points: bool = False) -> DriverRegistry:
    """
    Build a registry holding the built-in :class:`LocalDriver`.

    Args:
        load_entry_points: Also register drivers advertised by installed packages.
    """
    registry = DriverRegistry()
    registry.register_driver(LocalDriver())
    if load_entry_points:
        load_drivers_from_entry_points(registry)
    return registry
