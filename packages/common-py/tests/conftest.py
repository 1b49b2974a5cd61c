"""Pytest configuration and fixtures for common-py tests."""
import logging

import pytest

from scaffoldr_common import get_settings
from scaffoldr_common.logger import ROOT_LOGGER_NAME


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def fresh_settings():
    """Clear the cached Settings before and after a test that edits env vars."""
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logger():
    """Restore the scaffoldr root logger after a test reconfigures it."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate
