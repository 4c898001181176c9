"""JSON-RPC adapter – async client and chain environment for dev nodes."""
from dcnt_testkit.adapters.jsonrpc.client import HttpxJsonRpcClient
from dcnt_testkit.adapters.jsonrpc.environment import JsonRpcChainEnvironment

__all__ = ["HttpxJsonRpcClient", "JsonRpcChainEnvironment"]
