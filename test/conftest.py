from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

import pytest
from dotenv import load_dotenv

from projectkit.core.config import get_settings
from projectkit.fs import MemoryFileSystem
from projectkit.source import DriverRegistry, LocalDriver, SourceResolver

TEST_ROOT = Path(__file__).resolve().parent
# test/.env first, then test/.env.example for defaults
load_dotenv(TEST_ROOT / ".env", override=False)
load_dotenv(TEST_ROOT / ".env.example", override=False)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Make every test read settings from its own (possibly patched) environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Undo handler and level changes made to the root logger by a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    return MemoryFileSystem()


@pytest.fixture
def write_text(memory_fs: MemoryFileSystem) -> Callable[[str, str], None]:
    """Write a text file into ``memory_fs``, creating parent directories."""

    def _write(path: str, content: str) -> None:
        memory_fs.write_file(path, content.encode("utf-8"))

    return _write


@pytest.fixture
def resolver(memory_fs: MemoryFileSystem) -> SourceResolver:
    """A resolver whose ``local://`` driver reads from ``memory_fs``."""
    registry = DriverRegistry()
    registry.register_driver(LocalDriver(memory_fs))
    return SourceResolver(registry)
