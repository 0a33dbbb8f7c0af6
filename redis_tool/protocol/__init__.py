"""Console command grammar for Redis-Tool."""

from .commands import Command, CommandType, Response, ResponseStatus
from .parser import CommandParser

__all__ = [
    "Command",
    "CommandType",
    "Response",
    "ResponseStatus",
    "CommandParser",
]
