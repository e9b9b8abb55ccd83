"""Pytest configuration and shared fixtures for adtkit tests."""

import logging

import pytest
import structlog

from adtkit import config


@pytest.fixture(autouse=True)
def reset_state():
    """Restore configuration, structlog and root logging after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    config.reset()
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from adtkit import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from adtkit import Err

    return Err(ValueError("test error"))


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


class CallRecorder:
    """Callable that records every argument it is called with."""

    def __init__(self, returns=None):
        self.calls = []
        self.returns = returns

    def __call__(self, *args):
        self.calls.append(args)
        return self.returns

    @property
    def called(self) -> bool:
        return bool(self.calls)


@pytest.fixture
def recorder():
    """Factory for CallRecorder instances."""
    return CallRecorder
