#!/usr/bin/env python3
"""
Redis-Tool Example

Stores a value, reads it back and shows a few of the other helpers.

Usage:
    python scripts/example.py
    python scripts/example.py --host 1.2.3.4 --port 6380
"""

import argparse

from redis_tool import RedisTool


def main():
    parser = argparse.ArgumentParser(description="Redis-Tool example")
    parser.add_argument("--host", type=str, default="localhost", help="Redis host (default: localhost)")
    parser.add_argument("--port", type=int, default=6379, help="Redis port (default: 6379)")
    parser.add_argument("--database", type=int, default=0, help="Database index (default: 0)")
    args = parser.parse_args()

    config = {
        "host": args.host,
        "port": args.port,
        "password": "",
        "database": str(args.database),
    }

    with RedisTool(config) as tool:
        tool.set_value("test", "test")
        print(f"test = {tool.get_value('test')!r}")

        tool.set_hash_value("user:1", "name", "alice", ttl=60)
        print(f"user:1 = {tool.get_all_hash('user:1')!r}")

        print(f"keys matching 'user:*' = {tool.keys('user:*')!r}")

        tool.delete_value("test")
        tool.delete_value("user:1")


if __name__ == "__main__":
    main()
