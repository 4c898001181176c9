"""Testing fakes – in-memory doubles for kernel ports."""
from dcnt_testkit.testing.fakes.chain import STALE_TIMESTAMP_RPC_CODE, InMemoryChain, MinedBlock

__all__ = ["InMemoryChain", "MinedBlock", "STALE_TIMESTAMP_RPC_CODE"]
