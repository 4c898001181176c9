"""Shared fixtures for the unit suite."""
import logging

import pytest
import structlog

from dcnt_testkit.testing.fixtures import fake_chain, logical_clock  # noqa: F401


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)
