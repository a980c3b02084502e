"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Stores are real SQLite files under pytest's tmp_path, so every test gets
a fresh, isolated store that disappears with the test directory.
"""

import io
from collections.abc import Generator

import pytest
from rich.console import Console

from kvrepl.core.config import get_app_config
from kvrepl.shell.session import Session
from kvrepl.storage.store import KeyValueStore


@pytest.fixture(autouse=True)
def _clear_config_cache() -> Generator[None, None, None]:
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_app_config.cache_clear()
    yield
    get_app_config.cache_clear()


# =============================================================================
# Storage Fixtures
# =============================================================================


@pytest.fixture
def store_path(tmp_path) -> str:
    """Path of a not-yet-created store inside the test's tmp directory."""
    return str(tmp_path / "test.db")


@pytest.fixture
def store(store_path: str) -> Generator[KeyValueStore, None, None]:
    """
    Provide an open store for a single test.

    Usage:
        def test_put(store: KeyValueStore):
            store.put(b"k", b"v")
            assert store.get(b"k") == b"v"
    """
    kv = KeyValueStore.open_or_create(store_path)
    yield kv
    kv.close()


# =============================================================================
# Shell Fixtures
# =============================================================================


@pytest.fixture
def session() -> Generator[Session, None, None]:
    """Session using the real store factory. Released after the test."""
    s = Session()
    yield s
    s.release()


@pytest.fixture
def console() -> Console:
    """
    Rich console that records into a string buffer.

    Usage:
        def test_output(console: Console):
            console.print("hi")
            assert console.file.getvalue() == "hi\n"
    """
    return Console(file=io.StringIO(), width=120, highlight=False)
