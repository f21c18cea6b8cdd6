"""Config settings – env-based configuration."""
from expert_directory.config.settings.base import Settings
from expert_directory.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
