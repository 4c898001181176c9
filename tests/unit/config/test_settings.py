"""Unit tests for config settings & validation."""

import pathlib
from dataclasses import dataclass
from typing import ClassVar

import pytest

from dcnt_testkit.config import (
    ChainSettings,
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)
from dcnt_testkit.kernel.errors import ApplicationError

_CHAIN_ENV = (
    "DCNT_CHAIN_RPC_URL",
    "DCNT_CHAIN_TIMEOUT",
    "DCNT_CHAIN_SET_NEXT_TIMESTAMP_METHOD",
    "DCNT_CHAIN_MINE_METHOD",
    "DCNT_CHAIN_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    # setenv first so teardown also removes values written by python-dotenv
    for key in _CHAIN_ENV:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


@dataclass
class NodeSettings(Settings):
    _prefix: ClassVar[str] = "NODE"

    chain_id: int
    forking: bool = False


# ---------------------------------------------------------------------------
# ChainSettings defaults & validation
# ---------------------------------------------------------------------------


class TestChainSettings:
    def test_defaults(self) -> None:
        settings = ChainSettings()
        assert settings.rpc_url == "http://127.0.0.1:8545"
        assert settings.timeout == 10.0
        assert settings.set_next_timestamp_method == "evm_setNextBlockTimestamp"
        assert settings.mine_method == "evm_mine"
        assert settings.log_level == "INFO"

    def test_rejects_non_http_url(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ChainSettings(rpc_url="ws://127.0.0.1:8545")
        assert exc_info.value.setting_name == "rpc_url"

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ChainSettings(timeout=0)

    def test_rejects_empty_mine_method(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ChainSettings(mine_method="")

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ChainSettings(log_level="chatty")

    def test_accepts_lowercase_log_level(self) -> None:
        assert ChainSettings(log_level="debug").log_level == "debug"

    def test_https_url_accepted(self) -> None:
        assert ChainSettings(rpc_url="https://rpc.example").rpc_url == "https://rpc.example"


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_env_absent(self, clean_env: pytest.MonkeyPatch) -> None:
        assert EnvSettingsLoader().load(ChainSettings) == ChainSettings()

    def test_loads_url(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DCNT_CHAIN_RPC_URL", "http://anvil:8545")
        assert EnvSettingsLoader().load(ChainSettings).rpc_url == "http://anvil:8545"

    def test_loads_float(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DCNT_CHAIN_TIMEOUT", "2.5")
        assert EnvSettingsLoader().load(ChainSettings).timeout == 2.5

    def test_loads_method_names(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DCNT_CHAIN_MINE_METHOD", "anvil_mine")
        assert EnvSettingsLoader().load(ChainSettings).mine_method == "anvil_mine"

    def test_uncoercible_value(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DCNT_CHAIN_TIMEOUT", "soon")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(ChainSettings)
        assert exc_info.value.setting_name == "DCNT_CHAIN_TIMEOUT"

    def test_invalid_value_surfaces_validation(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DCNT_CHAIN_RPC_URL", "localhost:8545")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(ChainSettings)

    def test_loads_int_and_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NODE_CHAIN_ID", "31337")
        monkeypatch.setenv("NODE_FORKING", "yes")
        settings = EnvSettingsLoader().load(NodeSettings)
        assert settings.chain_id == 31337
        assert settings.forking is True

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NODE_CHAIN_ID", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(NodeSettings)
        assert exc_info.value.setting_name == "NODE_CHAIN_ID"


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, clean_env: pytest.MonkeyPatch, tmp_path: pathlib.Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("DCNT_CHAIN_RPC_URL=http://from-dotenv:8545\n")
        settings = DotenvSettingsLoader(str(env_file)).load(ChainSettings)
        assert settings.rpc_url == "http://from-dotenv:8545"

    def test_existing_env_wins_without_override(
        self, clean_env: pytest.MonkeyPatch, tmp_path: pathlib.Path
    ) -> None:
        clean_env.setenv("DCNT_CHAIN_RPC_URL", "http://from-env:8545")
        env_file = tmp_path / ".env"
        env_file.write_text("DCNT_CHAIN_RPC_URL=http://from-dotenv:8545\n")
        settings = DotenvSettingsLoader(str(env_file)).load(ChainSettings)
        assert settings.rpc_url == "http://from-env:8545"


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


class TestConfigErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)
        assert issubclass(ConfigError, ApplicationError)

    def test_invalid_setting_value_fields(self) -> None:
        err = InvalidSettingValueError("timeout", -1, "must be positive")
        assert err.value == -1
        assert err.reason == "must be positive"
        assert "timeout" in err.message

    def test_errors_carry_setting_detail(self) -> None:
        err = InvalidSettingValueError("rpc_url", "ws://x", "must be an http(s) URL")
        assert err.to_dict()["detail"] == {"setting": "rpc_url", "reason": "must be an http(s) URL"}
        assert MissingRequiredSettingError("NODE_CHAIN_ID").detail == {"setting": "NODE_CHAIN_ID"}


class TestEnvKey:
    def test_chain_settings_keys(self) -> None:
        assert ChainSettings.env_key("log_level") == "DCNT_CHAIN_LOG_LEVEL"

    def test_unprefixed_settings(self) -> None:
        @dataclass
        class Bare(Settings):
            host: str = "localhost"

        assert Bare.env_key("host") == "HOST"
