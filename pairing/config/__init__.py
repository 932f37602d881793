"""Configuration package for runtime settings and startup validation."""

from .settings import (
    AppSettings,
    SettingsLoadError,
    config_build_app_metadata,
    config_load_app_metadata,
    config_load_log_level,
    config_load_settings,
)

__all__ = [
    "AppSettings",
    "SettingsLoadError",
    "config_build_app_metadata",
    "config_load_app_metadata",
    "config_load_log_level",
    "config_load_settings",
]
