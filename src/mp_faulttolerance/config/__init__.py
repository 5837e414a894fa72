"""Config – 12-factor settings and validation errors."""

from mp_faulttolerance.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ResilienceSettings,
    RestClientSettings,
    Settings,
    SettingsLoader,
)
from mp_faulttolerance.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ResilienceSettings",
    "RestClientSettings",
    "Settings",
    "SettingsLoader",
]
