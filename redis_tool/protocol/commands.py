"""
Console Command and Response Definitions

This module defines the data structures shared by the parser and the console.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class CommandType(Enum):
    """Enumeration of supported command types."""
    SET = auto()
    GET = auto()
    HSET = auto()
    HGET = auto()
    HGETALL = auto()
    DEL = auto()
    EXISTS = auto()
    KEYS = auto()
    FLUSHDB = auto()
    PING = auto()
    QUIT = auto()
    UNKNOWN = auto()


class ResponseStatus(Enum):
    """Enumeration of response statuses."""
    OK = "OK"
    ERROR = "ERROR"


@dataclass
class Command:
    """
    Represents a parsed console command.

    Attributes:
        type: The type of command
        key: The key, hash name or KEYS pattern (empty for FLUSHDB/PING/QUIT)
        field: The hash field for HSET and HGET
        value: The value for SET and HSET
        ttl: Expiry in seconds for SET and HSET (0 = no expiry)
        raw: The original raw command string
    """
    type: CommandType
    key: str = ""
    field: str = ""
    value: str = ""
    ttl: int = 0
    raw: str = ""

    @property
    def expiry(self) -> Optional[int]:
        """TTL in the form RedisTool expects: None means no expiry."""
        return self.ttl if self.ttl > 0 else None

    @property
    def is_valid(self) -> bool:
        """Check if the command carries the arguments its type needs."""
        if self.type == CommandType.UNKNOWN:
            return False
        if self.type in (CommandType.FLUSHDB, CommandType.PING, CommandType.QUIT):
            return True
        if self.type in (CommandType.GET, CommandType.HGETALL, CommandType.DEL,
                         CommandType.EXISTS, CommandType.KEYS):
            return bool(self.key)
        if self.type == CommandType.SET:
            return bool(self.key) and bool(self.value)
        if self.type == CommandType.HGET:
            return bool(self.key) and bool(self.field)
        if self.type == CommandType.HSET:
            return bool(self.key) and bool(self.field) and bool(self.value)
        return False


@dataclass
class Response:
    """
    Represents a console reply.

    Attributes:
        status: OK or ERROR
        message: Response message or error description
        value: The value returned (for GET-style operations)
    """
    status: ResponseStatus
    message: str = ""
    value: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.status == ResponseStatus.OK

    @classmethod
    def ok(cls, message: str = "", value: Optional[str] = None) -> "Response":
        """Create a successful response."""
        return cls(status=ResponseStatus.OK, message=message, value=value)

    @classmethod
    def error(cls, message: str) -> "Response":
        """Create an error response."""
        return cls(status=ResponseStatus.ERROR, message=message)

    @classmethod
    def stored(cls) -> "Response":
        return cls.ok(message="stored")

    @classmethod
    def not_stored(cls) -> "Response":
        return cls.error(message="not stored")

    @classmethod
    def deleted(cls) -> "Response":
        return cls.ok(message="deleted")

    @classmethod
    def flushed(cls) -> "Response":
        return cls.ok(message="flushed")

    @classmethod
    def key_not_found(cls) -> "Response":
        return cls.error(message="key not found")

    @classmethod
    def not_connected(cls) -> "Response":
        return cls.error(message="not connected")

    @classmethod
    def invalid_command(cls) -> "Response":
        return cls.error(message="invalid command")

    @classmethod
    def exists_response(cls, exists: bool) -> "Response":
        """Create an EXISTS response."""
        return cls.ok(message="1" if exists else "0")

    @classmethod
    def value_response(cls, value: str) -> "Response":
        """Create a GET response with a value."""
        return cls.ok(value=value)
