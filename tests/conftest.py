"""Pytest configuration and shared fixtures for adtkit tests."""

import pytest


@pytest.fixture
def sample_done():
    """Sample Done value for testing."""
    from adtkit import Done

    return Done(42)


@pytest.fixture
def sample_fail():
    """Sample Fail value for testing."""
    from adtkit import Fail

    return Fail(ValueError("test error"))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from adtkit import Some

    return Some("hello")


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from adtkit import Nothing

    return Nothing


@pytest.fixture
def clean_config():
    """Restore default configuration and drop log hooks around a test."""
    from adtkit import clear_log_hooks, reset

    reset()
    clear_log_hooks()
    yield
    reset()
    clear_log_hooks()
