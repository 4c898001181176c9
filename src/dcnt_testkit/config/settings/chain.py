"""Config settings – ChainSettings for the development node."""
from __future__ import annotations

import dataclasses
import logging

from dcnt_testkit.config.settings.base import Settings
from dcnt_testkit.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class ChainSettings(Settings):
    """Where the development chain lives and how to drive its clock.

    Loaded from ``DCNT_CHAIN_*`` environment variables, e.g.
    ``DCNT_CHAIN_RPC_URL=http://127.0.0.1:8545``.
    """

    _prefix = "DCNT_CHAIN"

    rpc_url: str = "http://127.0.0.1:8545"
    timeout: float = 10.0
    set_next_timestamp_method: str = "evm_setNextBlockTimestamp"
    mine_method: str = "evm_mine"
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not self.rpc_url.startswith(("http://", "https://")):
            raise InvalidSettingValueError("rpc_url", self.rpc_url, "must be an http(s) URL")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")
        if not self.set_next_timestamp_method:
            raise InvalidSettingValueError(
                "set_next_timestamp_method", self.set_next_timestamp_method, "must not be empty"
            )
        if not self.mine_method:
            raise InvalidSettingValueError("mine_method", self.mine_method, "must not be empty")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")


__all__ = ["ChainSettings"]
