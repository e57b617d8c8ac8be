"""Driver registry.

The registry maps a URI scheme to the driver that resolves it. A driver that
owns several schemes is registered for all of them in one step or not at all.
"""

from __future__ import annotations

import logging
from typing import Dict

from projectkit.utils.rwlock import ReadWriteLock

from .base import Driver
from .errors import SchemeDriverAlreadyRegisteredError, SchemeDriverNotRegisteredError

logger = logging.getLogger(__name__)


class DriverRegistry:
    """
    Thread-safe mapping of schemes to drivers.

    Registration takes the lock exclusively, lookups share it, so no caller
    can observe a driver registered for only part of its schemes.

    Notes:
        - ``register_driver`` never overwrites an existing scheme.
        - Several schemes may point to the same driver instance.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._drivers: Dict[str, Driver] = {}

    def register_driver(self, driver: Driver) -> None:
        """
        Register a driver for every scheme it supports.

        Args:
            driver: The driver to register.

        Raises:
            SchemeDriverAlreadyRegisteredError: If any of the driver's schemes
                is already registered. The error names the first conflicting
                scheme and nothing is registered.
        """
        schemes = list(driver.get_supported_schemes())
        with self._lock.write_locked():
            for scheme in schemes:
                if scheme in self._drivers:
                    raise SchemeDriverAlreadyRegisteredError(scheme)
            for scheme in schemes:
                self._drivers[scheme] = driver
        logger.debug("Registered source driver %s for schemes %s", type(driver).__name__, schemes)

    def get_driver_by_scheme(self, scheme: str) -> Driver:
        """
        Retrieve the driver registered for ``scheme`` (exact, case-sensitive match).

        Raises:
            SchemeDriverNotRegisteredError: If no driver owns the scheme.
        """
        with self._lock.read_locked():
            try:
                return self._drivers[scheme]
            except KeyError:
                raise SchemeDriverNotRegisteredError(scheme) from None

    def schemes(self) -> list[str]:
        """Return the registered schemes, sorted."""
        with self._lock.read_locked():
            return sorted(self._drivers)
