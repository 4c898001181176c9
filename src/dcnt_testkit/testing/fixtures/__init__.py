"""Testing fixtures – pytest fixtures for the chain clock.

Register in your ``conftest.py``::

    pytest_plugins = ["dcnt_testkit.testing.fixtures"]
"""
from dcnt_testkit.testing.fixtures.clock import fake_chain, logical_clock

__all__ = ["fake_chain", "logical_clock"]
