"""Config settings – environment-based configuration."""
from mp_maybe.config.settings.base import Settings
from mp_maybe.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
