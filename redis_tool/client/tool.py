"""
Redis Facade Module

This module implements RedisTool, a thin wrapper around a redis-py client.

Every public operation verifies the connection with PING first. When the
server does not answer, the operation returns False (an empty list for
keys()) instead of raising. Errors raised by the command itself after a
successful check propagate unchanged.
"""

import logging
import time
from typing import Any, Dict, List, Mapping, Optional, Union

import redis
from redis.backoff import NoBackoff
from redis.exceptions import RedisError
from redis.retry import Retry

from ..config.settings import ConnectionConfig, resolve_config, settings
from .errors import ConnectionFailedError, RedisToolError

logger = logging.getLogger(__name__)


class RedisTool:
    """
    Convenience facade over a single Redis connection.

    Usage:
        tool = RedisTool({"host": "localhost", "port": 6379})
        tool.set_value("greeting", "hello", ttl=60)
        tool.get_value("greeting")  # 'hello'

    Attributes:
        config: The resolved ConnectionConfig
        retry_times: Extra connection attempts after the first one fails
    """

    def __init__(
            self,
            config: Optional[Mapping[str, Any]] = None,
            retry_times: Optional[int] = None,
            retry_interval: Optional[float] = None,
            socket_timeout: Optional[float] = None,
    ):
        """
        Connect to Redis.

        Args:
            config: Mapping with host, port, password and database keys
            retry_times: Extra attempts after the first (default from settings)
            retry_interval: Seconds to sleep between attempts
            socket_timeout: Socket timeout passed to the client

        Raises:
            ConnectionFailedError: If no attempt succeeds
            RedisToolError: On any other client error during setup
        """
        self.config: ConnectionConfig = resolve_config(config)
        self.retry_times = retry_times if retry_times is not None else settings.RETRY_TIMES
        self.retry_interval = (
            retry_interval if retry_interval is not None else settings.RETRY_INTERVAL
        )
        timeout = socket_timeout if socket_timeout is not None else settings.SOCKET_TIMEOUT

        # AUTH and SELECT are issued by the client on every new connection.
        # One PING is one attempt; retrying is left to _connect().
        self._redis = redis.Redis(
            host=self.config.host,
            port=self.config.port,
            password=self.config.password,
            db=self.config.database,
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
            decode_responses=True,
            retry=Retry(NoBackoff(), 0),
        )

        try:
            self._connect()
        except RedisError as e:
            raise RedisToolError(str(e)) from e

    def _connect(self) -> None:
        """Ping the server until it answers or the retries run out."""
        attempts = self.retry_times + 1
        for attempt in range(1, attempts + 1):
            logger.debug(
                f"Connecting to {self.config.host}:{self.config.port} "
                f"(attempt {attempt}/{attempts})"
            )
            try:
                self._redis.ping()
            except redis.AuthenticationError:
                raise
            except (redis.ConnectionError, redis.TimeoutError) as e:
                logger.warning(f"Connection attempt {attempt} failed: {e}")
                if attempt < attempts and self.retry_interval > 0:
                    time.sleep(self.retry_interval)
                continue

            logger.info(
                f"Connected to Redis at {self.config.host}:{self.config.port}, "
                f"db {self.config.database}"
            )
            return

        raise ConnectionFailedError(self.config.host, self.config.port, attempts)

    def is_connected(self) -> bool:
        """Return True if the server answers PING."""
        try:
            return self._redis.ping() is True
        except RedisError as e:
            logger.warning(f"Redis liveness check failed: {e}")
            return False

    def get_redis(self) -> redis.Redis:
        """Return the underlying redis-py client."""
        return self._redis

    def set_value(self, key: str, value: Any, ttl: Optional[int] = settings.DEFAULT_TTL) -> bool:
        """
        Store a string value.

        Args:
            key: The key to store
            value: The value to associate with the key
            ttl: Expiry in seconds, or None to keep the key forever

        Returns:
            True if the server acknowledged the write, False otherwise
        """
        if not self.is_connected():
            return False

        if ttl is not None:
            status = self._redis.setex(key, ttl, value)
        else:
            status = self._redis.set(key, value)

        return status is True

    def set_index(self, index_key: str, value: str) -> bool:
        """Store an index entry with the default TTL."""
        return self.set_value(index_key, value)

    def set_hash_value(
            self,
            hash_name: str,
            key: str,
            value: Any,
            ttl: Optional[int] = settings.DEFAULT_TTL,
    ) -> bool:
        """
        Set a hash field and refresh the expiry of the whole hash.

        HSET and EXPIRE run inside one MULTI/EXEC transaction.

        Returns:
            True once the transaction has executed, False if not connected
        """
        if not self.is_connected():
            return False

        with self._redis.pipeline(transaction=True) as pipe:
            pipe.hset(hash_name, key, value)
            if ttl is not None:
                pipe.expire(hash_name, ttl)
            pipe.execute()

        return True

    def get_value(self, key: str) -> Union[str, None, bool]:
        """
        Return the value stored at key.

        Returns None when the key is missing and False when not connected.
        """
        if not self.is_connected():
            return False

        return self._redis.get(key)

    def get_hash_value(self, hash_name: str, key: str) -> Union[str, None, bool]:
        """Return one field of a hash, None if missing, False if not connected."""
        if not self.is_connected():
            return False

        return self._redis.hget(hash_name, key)

    def get_all_hash(self, hash_name: str) -> Union[Dict[str, str], bool]:
        """Return every field of a hash; an empty dict when the hash is missing."""
        if not self.is_connected():
            return False

        return self._redis.hgetall(hash_name)

    def delete_value(self, key: str) -> bool:
        """Delete a key. Returns True if a key was removed."""
        if not self.is_connected():
            return False

        return bool(self._redis.delete(key))

    def exists(self, key: str) -> bool:
        if not self.is_connected():
            return False

        return bool(self._redis.exists(key))

    def flush_database(self) -> bool:
        """Remove every key from the selected database."""
        if not self.is_connected():
            return False

        return self._redis.flushdb()

    def keys(self, pattern: str) -> List[str]:
        """
        Return the keys matching a glob-style pattern.

        Iterates with SCAN rather than KEYS so the server is never blocked.
        SCAN may report a key more than once; duplicates are dropped and
        first-seen order is kept.

        Returns:
            Matching keys, or an empty list when not connected
        """
        if not self.is_connected():
            return []

        return list(dict.fromkeys(self._redis.scan_iter(match=pattern)))

    def close(self) -> None:
        """Release the connection."""
        self._redis.close()
        logger.debug("Redis connection closed")

    def __enter__(self) -> "RedisTool":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
