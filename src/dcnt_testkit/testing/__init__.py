"""Testing support – fakes and fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["dcnt_testkit.testing.fixtures"]
"""

from dcnt_testkit.testing.fakes import InMemoryChain, MinedBlock

__all__ = ["InMemoryChain", "MinedBlock"]
