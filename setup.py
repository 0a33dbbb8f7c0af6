#!/usr/bin/env python3
"""
Redis-Tool Setup Script
=======================
Allows installation of the redis-tool package.

Usage:
    pip install -e .           # Development install
    pip install -e .[test]     # With test dependencies
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="redis-tool",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    python_requires=">=3.10",
    install_requires=[
        "redis>=4.2",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "redis-tool=redis_tool.cli:main",
        ],
    },
)
