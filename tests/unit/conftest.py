"""
Unit Test Fixtures.

Fixtures for unit tests - the storage collaborator is mocked.
Unit tests for the shell layers should never touch a real store.
"""

from unittest.mock import MagicMock

import pytest

from kvrepl.shell.session import Session
from kvrepl.storage.store import KeyValueStore


# =============================================================================
# Storage Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_store() -> MagicMock:
    """
    Mock store handle.

    Usage:
        def test_read(mock_store):
            mock_store.get.return_value = b"value"
    """
    store = MagicMock(spec=KeyValueStore)
    store.path = "mock.db"
    store.is_open = True
    store.get.return_value = b""
    store.iterate.return_value = iter([])
    return store


@pytest.fixture
def mock_opener(mock_store: MagicMock) -> MagicMock:
    """Store factory returning mock_store."""
    return MagicMock(return_value=mock_store)


@pytest.fixture
def closed_session(mock_opener: MagicMock) -> Session:
    """Session with nothing open, backed by the mock factory."""
    return Session(opener=mock_opener)


@pytest.fixture
def open_session(closed_session: Session) -> Session:
    """Session with mock_store already bound."""
    closed_session.open("mock.db")
    return closed_session


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("module.logger", mock_logger):
                # Test code that logs
                mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
