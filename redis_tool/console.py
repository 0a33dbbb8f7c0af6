"""
Interactive Console Module

Reads command lines, runs them through a RedisTool and prints the replies.

Usage:
    console = Console(RedisTool({"host": "localhost"}))
    console.run()                       # Interactive loop
    console.execute_line("GET mykey")   # Single command -> Response
"""

import logging
from typing import Callable, Optional

from redis.exceptions import RedisError

from .client.tool import RedisTool
from .protocol.commands import Command, CommandType, Response
from .protocol.parser import CommandParser

# Enable command history with arrow keys (works on Unix systems)
try:
    import readline  # noqa: F401
except ImportError:
    pass  # readline not available on Windows by default

logger = logging.getLogger(__name__)

HELP_TEXT = """
Redis-Tool Commands:
--------------------
  SET <key> <value> [ttl]            Store a string (TTL in seconds, 0 = none)
  GET <key>                          Retrieve a string
  HSET <hash> <field> <value> [ttl]  Set a hash field (TTL applies to the hash)
  HGET <hash> <field>                Retrieve a hash field
  HGETALL <hash>                     Retrieve every field of a hash
  DEL <key>                          Delete a key
  EXISTS <key>                       Check if a key exists (returns 1 or 0)
  KEYS <pattern>                     List keys matching a glob pattern
  FLUSHDB                            Remove every key in the database
  PING                               Check the connection
  QUIT                               Exit

Console Commands:
-----------------
  help                               Show this help message
  exit                               Exit the console
"""


class Console:
    """
    Line-oriented front end for a RedisTool.

    Attributes:
        tool: The RedisTool commands are executed against
        parser: The CommandParser for the console grammar
    """

    def __init__(self, tool: RedisTool, output: Callable[[str], None] = print):
        self.tool = tool
        self.parser = CommandParser()
        self._output = output

    def execute_line(self, line: str) -> Optional[Response]:
        """
        Parse and execute one line.

        Returns:
            The Response, or None when the line is QUIT
        """
        command = self.parser.parse_request(line)

        if command.type == CommandType.QUIT:
            return None
        if not command.is_valid:
            return Response.invalid_command()

        try:
            return self.execute(command)
        except RedisError as e:
            logger.debug(f"Command failed: {command.raw}: {e}")
            return Response.error(str(e))

    def execute(self, command: Command) -> Response:
        """
        Run a parsed command against the tool.

        RedisTool answers False (an empty list for keys) both when the
        server is gone and for an ordinary miss. When such an answer comes
        back the connection is checked again to tell the two apart.
        """
        if command.type == CommandType.PING:
            if self.tool.is_connected():
                return Response.ok(message="PONG")
            return Response.not_connected()

        if command.type == CommandType.SET:
            if self.tool.set_value(command.key, command.value, ttl=command.expiry):
                return Response.stored()
            return self._unless_disconnected(Response.not_stored())

        if command.type == CommandType.HSET:
            stored = self.tool.set_hash_value(
                command.key, command.field, command.value, ttl=command.expiry
            )
            if stored:
                return Response.stored()
            return self._unless_disconnected(Response.not_stored())

        if command.type == CommandType.GET:
            return self._value_or_missing(self.tool.get_value(command.key))

        if command.type == CommandType.HGET:
            return self._value_or_missing(self.tool.get_hash_value(command.key, command.field))

        if command.type == CommandType.HGETALL:
            fields = self.tool.get_all_hash(command.key)
            if fields is False:
                return Response.not_connected()
            if not fields:
                return Response.key_not_found()
            return Response.value_response(
                " ".join(f"{name}={value}" for name, value in fields.items())
            )

        if command.type == CommandType.DEL:
            if self.tool.delete_value(command.key):
                return Response.deleted()
            return self._unless_disconnected(Response.key_not_found())

        if command.type == CommandType.EXISTS:
            if self.tool.exists(command.key):
                return Response.exists_response(True)
            return self._unless_disconnected(Response.exists_response(False))

        if command.type == CommandType.KEYS:
            keys = self.tool.keys(command.key)
            if keys:
                return Response.value_response(" ".join(keys))
            return self._unless_disconnected(Response.value_response("(empty)"))

        if command.type == CommandType.FLUSHDB:
            if self.tool.flush_database() is False:
                return Response.not_connected()
            return Response.flushed()

        return Response.invalid_command()

    def _unless_disconnected(self, response: Response) -> Response:
        """Return response, or a not-connected error if the server is gone."""
        if not self.tool.is_connected():
            return Response.not_connected()
        return response

    @staticmethod
    def _value_or_missing(value) -> Response:
        # False only ever means the liveness check failed
        if value is False:
            return Response.not_connected()
        if value is None:
            return Response.key_not_found()
        return Response.value_response(str(value))

    def run(self) -> None:
        """Read commands from stdin until QUIT, exit or end of input."""
        self._output("Connected! Type 'help' for commands.\n")

        try:
            while True:
                try:
                    line = input(">>> ").strip()
                except EOFError:
                    self._output("\nGoodbye!")
                    break

                if not line:
                    continue

                lower_line = line.lower()
                if lower_line == "help":
                    self._output(HELP_TEXT)
                    continue
                if lower_line == "exit":
                    self._output("Goodbye!")
                    break

                response = self.execute_line(line)
                if response is None:
                    self._output("Goodbye!")
                    break
                self._output(self.parser.format_response(response))

        except KeyboardInterrupt:
            self._output("\n\nInterrupted. Goodbye!")
