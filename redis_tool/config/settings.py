"""
Redis-Tool Configuration Settings

This module contains the configuration defaults for Redis-Tool and the
helper that turns a plain mapping into connection parameters.
"""

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class Settings:
    """Process-wide defaults."""

    # Connection settings
    HOST: str = os.environ.get("REDIS_TOOL_HOST", "127.0.0.1")
    PORT: int = int(os.environ.get("REDIS_TOOL_PORT", "6379"))
    PASSWORD: Optional[str] = os.environ.get("REDIS_TOOL_PASSWORD") or None
    DATABASE: int = int(os.environ.get("REDIS_TOOL_DATABASE", "0"))
    SOCKET_TIMEOUT: float = float(os.environ.get("REDIS_TOOL_SOCKET_TIMEOUT", "5.0"))

    # Retry settings
    RETRY_TIMES: int = int(os.environ.get("REDIS_TOOL_RETRY_TIMES", "3"))
    RETRY_INTERVAL: float = float(os.environ.get("REDIS_TOOL_RETRY_INTERVAL", "0.1"))

    # TTL settings
    DEFAULT_TTL: int = 86400  # One day

    # Logging settings
    DEBUG: bool = os.environ.get("REDIS_TOOL_DEBUG", "false").lower() == "true"


# Global settings instance
settings = Settings()


@dataclass
class ConnectionConfig:
    """
    Parameters needed to open a connection.

    Attributes:
        host: Redis server address
        port: Redis server port
        password: AUTH password, or None to skip authentication
        database: Database index passed to SELECT
    """
    host: str
    port: int
    password: Optional[str] = None
    database: int = 0


def resolve_config(config: Optional[Mapping[str, Any]] = None) -> ConnectionConfig:
    """
    Build a ConnectionConfig from a mapping.

    Recognised keys are ``host``, ``port``, ``password`` and ``database``.
    Missing or None entries fall back to the global settings. Numeric
    strings are accepted for ``port`` and ``database``; an empty password
    is treated as no password.

    Raises:
        ValueError: If ``port`` or ``database`` is not an integer
    """
    config = config or {}

    host = config.get("host") or settings.HOST
    port = config.get("port")
    password = config.get("password")
    if password is None:
        password = settings.PASSWORD
    database = config.get("database")

    return ConnectionConfig(
        host=str(host),
        port=int(port) if port is not None else settings.PORT,
        password=str(password) if password else None,
        database=int(database) if database is not None else settings.DATABASE,
    )
