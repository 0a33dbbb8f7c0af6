"""Configuration module for Redis-Tool."""

from .settings import ConnectionConfig, Settings, resolve_config, settings

__all__ = ["ConnectionConfig", "Settings", "resolve_config", "settings"]
