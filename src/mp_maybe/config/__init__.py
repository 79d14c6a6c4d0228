"""Config – settings dataclasses, loaders and their errors."""

from mp_maybe.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from mp_maybe.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
