"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
The redis-py client is replaced by a MagicMock so unit tests never need a
running server.
"""

import os
from typing import Generator
from unittest.mock import MagicMock, patch

import pytest
import redis

from redis_tool.client.errors import RedisToolError
from redis_tool.client.tool import RedisTool
from redis_tool.protocol.parser import CommandParser


# ============================================================================
# Redis Client Fixtures
# ============================================================================

@pytest.fixture
def redis_cls() -> Generator[MagicMock, None, None]:
    """Patch redis.Redis; the mock client answers PING by default."""
    with patch("redis_tool.client.tool.redis.Redis") as mock_cls:
        mock_cls.return_value.ping.return_value = True
        yield mock_cls


@pytest.fixture
def redis_client(redis_cls: MagicMock) -> MagicMock:
    """The mock client instance RedisTool will wrap."""
    return redis_cls.return_value


@pytest.fixture
def tool(redis_client: MagicMock) -> RedisTool:
    """A RedisTool connected to the mock client."""
    return RedisTool({"host": "localhost", "port": 6379}, retry_times=3, retry_interval=0)


@pytest.fixture
def disconnected_tool(tool: RedisTool, redis_client: MagicMock) -> RedisTool:
    """A RedisTool whose server stopped answering after construction."""
    redis_client.reset_mock()
    redis_client.ping.side_effect = redis.ConnectionError("Connection refused")
    return tool


# ============================================================================
# Console Fixtures
# ============================================================================

@pytest.fixture
def parser() -> CommandParser:
    """Create a CommandParser instance."""
    return CommandParser()


@pytest.fixture
def mock_tool() -> MagicMock:
    """A RedisTool double for console tests."""
    tool = MagicMock(spec=RedisTool)
    tool.is_connected.return_value = True
    return tool


# ============================================================================
# Live Server Fixtures
# ============================================================================

@pytest.fixture
def live_tool() -> Generator[RedisTool, None, None]:
    """
    Connect to a real Redis server for integration tests.

    Uses REDIS_TOOL_TEST_DATABASE (default 15) so a developer's data in
    database 0 is left alone. Skips when no server is reachable.
    """
    config = {
        "host": os.environ.get("REDIS_TOOL_HOST", "127.0.0.1"),
        "port": os.environ.get("REDIS_TOOL_PORT", "6379"),
        "password": os.environ.get("REDIS_TOOL_PASSWORD"),
        "database": os.environ.get("REDIS_TOOL_TEST_DATABASE", "15"),
    }
    try:
        live = RedisTool(config, retry_times=0, retry_interval=0, socket_timeout=1.0)
    except RedisToolError as e:
        pytest.skip(f"Redis not available: {e}")

    live.flush_database()
    yield live

    live.flush_database()
    live.close()


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that need a running Redis server"
    )
