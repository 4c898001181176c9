"""Config settings – 12-factor env-based configuration."""
from dcnt_testkit.config.settings.base import Settings
from dcnt_testkit.config.settings.chain import ChainSettings
from dcnt_testkit.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["ChainSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
