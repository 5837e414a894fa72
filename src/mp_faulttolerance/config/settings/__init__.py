"""Config settings – 12-factor env-based configuration."""
from mp_faulttolerance.config.settings.base import Settings
from mp_faulttolerance.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
    parse_duration,
)
from mp_faulttolerance.config.settings.resilience import ResilienceSettings, RestClientSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ResilienceSettings",
    "RestClientSettings",
    "Settings",
    "SettingsLoader",
    "parse_duration",
]
