"""Pytest configuration and fixtures."""

import pytest

from fluentcheck.config import get_settings, use_settings
from fluentcheck.verbose import disable_check_logging


@pytest.fixture(autouse=True)
def cleanup_check_logging():
    """Detach any handler a test attached to the fluentcheck logger."""
    yield
    disable_check_logging()


@pytest.fixture(autouse=True)
def restore_settings():
    """Put back the process-wide settings a test may have replaced."""
    original = get_settings()
    yield
    use_settings(original)
