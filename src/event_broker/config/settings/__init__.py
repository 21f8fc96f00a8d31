"""Config settings – env-based broker configuration."""
from event_broker.config.settings.base import Settings
from event_broker.config.settings.broker import BrokerSettings, load_settings
from event_broker.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "BrokerSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
