"""Tests for the source resolver."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from projectkit.core.errors import caused_by
from projectkit.fs import MemoryFileSystem
from projectkit.source import (
    DriverRegistry,
    PathNotFoundError,
    Resolver,
    SchemeDriverNotRegisteredError,
    SourceResolveError,
    SourceResolver,
    UriSchemeNotFoundError,
    split_scheme,
)


def _driver(schemes, resolve=None):
    driver = Mock()
    driver.get_supported_schemes.return_value = schemes
    if resolve is not None:
        driver.resolve.side_effect = resolve
    else:
        driver.resolve.return_value = MemoryFileSystem()
    return driver


@pytest.mark.parametrize(
    "uri,scheme",
    [
        ("local://path", "local"),
        ("local://", "local"),
        ("://path", ""),
        ("a://b://c", "a"),
    ],
)
def test_split_scheme(uri, scheme):
    assert split_scheme(uri) == scheme


@pytest.mark.parametrize("uri", ["", "local:/path", "path/only"])
def test_split_scheme_without_separator(uri):
    with pytest.raises(UriSchemeNotFoundError):
        split_scheme(uri)


class TestSourceResolver:
    def test_conforms_to_protocol(self):
        assert isinstance(SourceResolver(DriverRegistry()), Resolver)

    def test_dispatches_full_uri_to_driver(self):
        registry = DriverRegistry()
        driver = _driver(["a"])
        registry.register_driver(driver)

        fs = SourceResolver(registry).resolve("a://b://c")

        driver.resolve.assert_called_once_with("a://b://c")
        assert fs is driver.resolve.return_value

    def test_missing_separator_never_reaches_registry(self):
        registry = Mock()

        with pytest.raises(UriSchemeNotFoundError):
            SourceResolver(registry).resolve("no-scheme")

        registry.get_driver_by_scheme.assert_not_called()

    def test_unregistered_scheme(self):
        with pytest.raises(SchemeDriverNotRegisteredError, match="get driver by scheme"):
            SourceResolver(DriverRegistry()).resolve("s3://bucket")

    def test_driver_error_keeps_class_and_gains_context(self):
        registry = DriverRegistry()
        registry.register_driver(_driver(["a"], resolve=PathNotFoundError("x")))

        with pytest.raises(PathNotFoundError) as info:
            SourceResolver(registry).resolve("a://x")

        assert str(info.value) == "resolve a://x: path 'x' does not exist"

    def test_driver_os_error_is_wrapped(self):
        registry = DriverRegistry()
        registry.register_driver(_driver(["a"], resolve=PermissionError("denied")))

        with pytest.raises(SourceResolveError) as info:
            SourceResolver(registry).resolve("a://x")

        assert caused_by(info.value, PermissionError) is not None
