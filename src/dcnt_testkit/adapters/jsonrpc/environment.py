"""JSON-RPC adapter – JsonRpcChainEnvironment (Hardhat / Anvil style nodes)."""
from __future__ import annotations

from typing import Any

from dcnt_testkit.adapters.jsonrpc.client import HttpxJsonRpcClient
from dcnt_testkit.config.settings import ChainSettings
from dcnt_testkit.kernel.errors import SerializationError
from dcnt_testkit.observability.logging import configure_logging


class JsonRpcChainEnvironment:
    """``ChainEnvironment`` backed by a development node's test-control RPCs."""

    def __init__(
        self,
        client: HttpxJsonRpcClient,
        *,
        set_next_timestamp_method: str = "evm_setNextBlockTimestamp",
        mine_method: str = "evm_mine",
    ) -> None:
        self._client = client
        self._set_next_timestamp_method = set_next_timestamp_method
        self._mine_method = mine_method

    @classmethod
    def from_settings(cls, settings: ChainSettings) -> "JsonRpcChainEnvironment":
        """Build the client and environment, applying the logging level too."""
        configure_logging(settings)
        client = HttpxJsonRpcClient(settings.rpc_url, timeout=settings.timeout)
        return cls(
            client,
            set_next_timestamp_method=settings.set_next_timestamp_method,
            mine_method=settings.mine_method,
        )

    async def __aenter__(self) -> "JsonRpcChainEnvironment":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def set_next_block_timestamp(self, timestamp: int) -> None:
        await self._client.call(self._set_next_timestamp_method, [timestamp])

    async def mine(self) -> None:
        await self._client.call(self._mine_method, [])

    async def latest_timestamp(self) -> int:
        block = await self._client.call("eth_getBlockByNumber", ["latest", False])
        if not isinstance(block, dict) or "timestamp" not in block:
            raise SerializationError("Latest block is missing a timestamp", payload_type="block")
        return _quantity(block["timestamp"])


def _quantity(value: Any) -> int:
    # JSON-RPC quantities are hex strings; some nodes answer plain ints
    if isinstance(value, int):
        return value
    try:
        return int(value, 16)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Invalid quantity {value!r}", payload_type="quantity") from exc


__all__ = ["JsonRpcChainEnvironment"]
