"""
Unit Test Fixtures.

Fixtures for unit tests - external dependencies are mocked.
Unit tests should be fast and isolated; file I/O stays under tmp_path.
"""

from unittest.mock import MagicMock

import pytest


# =============================================================================
# Settings Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_app_config() -> MagicMock:
    """
    Mock YAML application configuration.

    Usage:
        def test_with_config(mock_app_config):
            with patch("module.get_app_config", return_value=mock_app_config):
                # Test code that uses app config
    """
    config = MagicMock()
    config.application.name = "Test Notes"
    config.application.pagination.default_limit = 10
    config.application.pagination.max_limit = None
    config.storage.data_file = "data/notes.json"
    config.storage.indent = 2
    config.concurrency.thread_pool.max_workers = 4
    return config


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
