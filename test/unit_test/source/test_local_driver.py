"""Tests for the local:// driver."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from projectkit.core.errors import caused_by
from projectkit.fs import MemoryFileSystem
from projectkit.source import (
    LOCAL_SCHEME,
    Driver,
    EmptyPathError,
    LocalDriver,
    PathCheckError,
    PathNotFoundError,
    UnsupportedSchemeError,
)


@pytest.fixture
def root_fs() -> MemoryFileSystem:
    fs = MemoryFileSystem()
    fs.write_file("rulebooks/general/rulebook.yaml", b"ai: {}")
    fs.write_file("file.txt", b"plain")
    return fs


def test_supported_schemes():
    driver = LocalDriver(MemoryFileSystem())

    assert isinstance(driver, Driver)
    assert driver.get_supported_schemes() == [LOCAL_SCHEME] == ["local"]


class TestResolve:
    def test_returns_scoped_read_only_view(self, root_fs):
        fs = LocalDriver(root_fs).resolve("local://rulebooks/general")

        assert fs.read_file("rulebook.yaml") == b"ai: {}"
        with pytest.raises(PermissionError):
            fs.write_file("new.yaml", b"")
        assert not root_fs.exists("rulebooks/general/new.yaml")

    @pytest.mark.parametrize(
        "uri",
        ["local://./rulebooks/general", "local://rulebooks//general/", "local://rulebooks/x/../general"],
    )
    def test_path_is_normalized(self, root_fs, uri):
        fs = LocalDriver(root_fs).resolve(uri)

        assert fs.exists("rulebook.yaml")

    def test_view_cannot_escape_its_directory(self, root_fs):
        fs = LocalDriver(root_fs).resolve("local://rulebooks/general")

        with pytest.raises(PermissionError):
            fs.read_file("../../file.txt")

    @pytest.mark.parametrize("uri", ["file://rulebooks", "LOCAL://rulebooks", "rulebooks"])
    def test_other_schemes_are_unsupported(self, root_fs, uri):
        with pytest.raises(UnsupportedSchemeError):
            LocalDriver(root_fs).resolve(uri)

    def test_empty_path(self, root_fs):
        with pytest.raises(EmptyPathError):
            LocalDriver(root_fs).resolve("local://")

    @pytest.mark.parametrize("uri", ["local://missing", "local://file.txt"])
    def test_missing_directory(self, root_fs, uri):
        with pytest.raises(PathNotFoundError, match="does not exist"):
            LocalDriver(root_fs).resolve(uri)

    def test_existence_check_failure(self, root_fs):
        with patch.object(root_fs, "dir_exists", side_effect=PermissionError("denied")):
            with pytest.raises(PathCheckError) as info:
                LocalDriver(root_fs).resolve("local://rulebooks")

        assert caused_by(info.value, PermissionError) is not None

    def test_defaults_to_local_disk(self, tmp_path):
        (tmp_path / "skills").mkdir()
        (tmp_path / "skills" / "note.txt").write_bytes(b"hi")

        fs = LocalDriver().resolve(f"local://{tmp_path / 'skills'}")

        assert fs.read_file("note.txt") == b"hi"
