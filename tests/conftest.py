"""Shared pytest fixtures."""

from unittest import mock

import pytest

from formatkit.conf import reset_settings


@pytest.fixture(autouse=True)
def fresh_formatkit_settings():
    """Rebuild the process-wide core settings around each test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def responder():
    """A responder double that records the order of format/any calls."""
    return mock.Mock(spec=["format", "any"])
