"""Config settings – 12-factor env-based configuration."""
from claims_rbac.config.settings.base import Settings
from claims_rbac.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from claims_rbac.config.settings.rbac import RbacSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "RbacSettings", "Settings", "SettingsLoader"]
