"""
Redis-Tool: Convenience Wrapper for Redis

A thin facade over redis-py providing connection setup with retry and
liveness-checked helpers for strings, hashes, key scanning and flushing.
"""

from .client import ConnectionFailedError, RedisTool, RedisToolError

__version__ = "1.0.0"

__all__ = ["RedisTool", "RedisToolError", "ConnectionFailedError"]
