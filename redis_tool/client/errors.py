"""Exceptions raised by Redis-Tool."""


class RedisToolError(Exception):
    """Base class for Redis-Tool errors."""


class ConnectionFailedError(RedisToolError):
    """Raised when every connection attempt has failed."""

    def __init__(self, host: str, port: int, attempts: int):
        self.host = host
        self.port = port
        self.attempts = attempts
        super().__init__(
            f"Unable to connect to Redis at {host}:{port} after {attempts} attempts"
        )
