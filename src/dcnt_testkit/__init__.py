"""
dcnt_testkit – simulated chain clock for contract test harnesses.

Import path convention::

    from dcnt_testkit.kernel.time import LogicalClock, ONE_DAY
    from dcnt_testkit.adapters.jsonrpc import JsonRpcChainEnvironment
    from dcnt_testkit.testing.fakes import InMemoryChain
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
