"""Config – 12-factor settings and loaders."""

from claims_rbac.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    RbacSettings,
    Settings,
    SettingsLoader,
)
from claims_rbac.config.validation import (
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
    "RbacSettings",
    "Settings",
    "SettingsLoader",
]
