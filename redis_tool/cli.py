#!/usr/bin/env python3
"""
Redis-Tool Entry Point

Usage:
    redis-tool                              # Interactive console on 127.0.0.1:6379
    redis-tool --host cache.local --port 6380
    redis-tool --database 2 GET mykey       # Run one command and exit
    redis-tool help                         # List console commands
    redis-tool --debug                      # Enable debug logging

Environment Variables:
    REDIS_TOOL_HOST         - Redis host
    REDIS_TOOL_PORT         - Redis port
    REDIS_TOOL_PASSWORD     - Redis password
    REDIS_TOOL_DATABASE     - Database index
    REDIS_TOOL_RETRY_TIMES  - Extra connection attempts
    REDIS_TOOL_DEBUG        - Enable debug mode (true/false)
"""

import argparse
import logging
import sys
from typing import List, Optional

from .client.errors import RedisToolError
from .client.tool import RedisTool
from .config.settings import settings
from .console import HELP_TEXT, Console


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Redis-Tool: convenience console for Redis",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--host",
        type=str,
        default=settings.HOST,
        help="Redis host",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=settings.PORT,
        help="Redis port",
    )

    parser.add_argument(
        "--password",
        type=str,
        default=settings.PASSWORD,
        help="Redis password",
    )

    parser.add_argument(
        "--database",
        type=int,
        default=settings.DATABASE,
        help="Database index",
    )

    parser.add_argument(
        "--retry-times",
        type=int,
        default=settings.RETRY_TIMES,
        help="Extra connection attempts after the first one fails",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command to run once instead of starting the console",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = parse_args(argv)

    setup_logging(debug=args.debug)
    logger = logging.getLogger(__name__)

    # help needs no server
    if [token.lower() for token in args.command] == ["help"]:
        print(HELP_TEXT)
        return 0

    config = {
        "host": args.host,
        "port": args.port,
        "password": args.password,
        "database": args.database,
    }

    try:
        tool = RedisTool(config, retry_times=args.retry_times)
    except RedisToolError as e:
        logger.error(f"Connection failed: {e}")
        print(f"Failed to connect to {args.host}:{args.port}. Is Redis running?")
        return 1

    with tool:
        console = Console(tool)

        if args.command:
            response = console.execute_line(" ".join(args.command))
            if response is None:
                return 0
            print(console.parser.format_response(response))
            return 0 if response.is_ok else 1

        console.run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
