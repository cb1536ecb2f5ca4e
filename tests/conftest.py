"""Shared fixtures for jfmt tests."""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """The CLI replaces loguru handlers with a sink bound to the runner's stderr."""
    yield
    logger.remove()


@pytest.fixture
def sample_document():
    return {
        "name": "Bob",
        "age": -3.14e10,
        "active": True,
        "spouse": None,
        "tags": ["a", "b{c}", 'quote " inside'],
        "nested": {"z": 1, "y": [False, {"key:like": "value"}]},
        "empty": {},
        "none": [],
    }
