"""Pytest configuration and shared fixtures for monadkit tests."""

import logging

import pytest


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from monadkit import Success

    return Success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from monadkit import Failure

    return Failure('test error')


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from monadkit import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from monadkit import Nothing

    return Nothing


@pytest.fixture
def restore_root_logger():
    """Restore the root logger's handlers and level after a test configures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def reset_config():
    """Reset the global monadkit configuration around a test."""
    import monadkit._config as config_module

    saved = config_module._config
    config_module._config = None
    yield
    config_module._config = saved
