"""
Console Command Parser

This module turns console input lines into Command objects and formats
Response objects back into text.
"""

from typing import List

from .commands import Command, CommandType, Response

# Commands taking exactly one key-like argument
_SINGLE_KEY_COMMANDS = {
    "GET": CommandType.GET,
    "HGETALL": CommandType.HGETALL,
    "DEL": CommandType.DEL,
    "EXISTS": CommandType.EXISTS,
    "KEYS": CommandType.KEYS,
}

# Commands taking no argument
_BARE_COMMANDS = {
    "FLUSHDB": CommandType.FLUSHDB,
    "PING": CommandType.PING,
    "QUIT": CommandType.QUIT,
}


class CommandParser:
    """
    Parser for the Redis-Tool console grammar.

    Format:
        Request:  <COMMAND> [ARGS...]
        Response: <STATUS> [DATA]

    Commands:
        SET <key> <value> [ttl]            -> OK stored
        GET <key>                          -> OK <value> | ERROR key not found
        HSET <hash> <field> <value> [ttl]  -> OK stored
        HGET <hash> <field>                -> OK <value> | ERROR key not found
        HGETALL <hash>                     -> OK f=v ... | ERROR key not found
        DEL <key>                          -> OK deleted | ERROR key not found
        EXISTS <key>                       -> OK 1 | OK 0
        KEYS <pattern>                     -> OK k1 k2 ... | OK (empty)
        FLUSHDB                            -> OK flushed
        PING                               -> OK PONG
        QUIT                               -> (console exits)

    Tokens are whitespace separated, so keys and values cannot contain
    spaces. TTL is a non-negative integer; 0 means no expiry.
    """

    def parse_request(self, data: str) -> Command:
        """
        Parse a raw line into a Command.

        Returns a Command with type=UNKNOWN for empty or malformed input.

        Examples:
            >>> cmd = CommandParser().parse_request("set mykey myvalue 60")
            >>> cmd.type == CommandType.SET, cmd.key, cmd.value, cmd.ttl
            (True, 'mykey', 'myvalue', 60)
        """
        raw = data.strip()
        if not raw:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        parts = raw.split()
        command_name = parts[0].upper()

        if command_name == "SET":
            return self._parse_set(parts, raw)
        if command_name == "HSET":
            return self._parse_hset(parts, raw)
        if command_name == "HGET":
            if len(parts) != 3:
                return Command(type=CommandType.UNKNOWN, raw=raw)
            return Command(type=CommandType.HGET, key=parts[1], field=parts[2], raw=raw)
        if command_name in _SINGLE_KEY_COMMANDS:
            if len(parts) != 2:
                return Command(type=CommandType.UNKNOWN, raw=raw)
            return Command(type=_SINGLE_KEY_COMMANDS[command_name], key=parts[1], raw=raw)
        if command_name in _BARE_COMMANDS:
            if len(parts) != 1:
                return Command(type=CommandType.UNKNOWN, raw=raw)
            return Command(type=_BARE_COMMANDS[command_name], raw=raw)

        return Command(type=CommandType.UNKNOWN, raw=raw)

    def _parse_set(self, parts: List[str], raw: str) -> Command:
        """
        Parse a SET command.

        Format: SET <key> <value> [ttl]
        """
        if len(parts) < 3 or len(parts) > 4:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        ttl = self._parse_ttl(parts[3]) if len(parts) == 4 else 0
        if ttl is None:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        return Command(type=CommandType.SET, key=parts[1], value=parts[2], ttl=ttl, raw=raw)

    def _parse_hset(self, parts: List[str], raw: str) -> Command:
        """
        Parse an HSET command.

        Format: HSET <hash> <field> <value> [ttl]
        """
        if len(parts) < 4 or len(parts) > 5:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        ttl = self._parse_ttl(parts[4]) if len(parts) == 5 else 0
        if ttl is None:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        return Command(
            type=CommandType.HSET,
            key=parts[1],
            field=parts[2],
            value=parts[3],
            ttl=ttl,
            raw=raw,
        )

    @staticmethod
    def _parse_ttl(token: str):
        """Return the TTL as an int, or None if it is not a non-negative integer."""
        try:
            ttl = int(token)
        except ValueError:
            return None
        return ttl if ttl >= 0 else None

    def format_response(self, response: Response) -> str:
        """
        Format a Response into a single line, without trailing newline.

        Examples:
            >>> CommandParser().format_response(Response.stored())
            'OK stored'
            >>> CommandParser().format_response(Response.key_not_found())
            'ERROR key not found'
        """
        prefix = response.status.value

        if response.value is not None:
            body = response.value
        else:
            body = response.message

        if body:
            return f"{prefix} {body}"
        return prefix
