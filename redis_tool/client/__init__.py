"""Client module for Redis-Tool."""

from .errors import ConnectionFailedError, RedisToolError
from .tool import RedisTool

__all__ = ["RedisTool", "RedisToolError", "ConnectionFailedError"]
