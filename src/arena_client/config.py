# src/arena_client/config.py

"""Centralized configuration for arena_client.

This module provides the settings used throughout the client: the remote API
root, request timeout, environment variable names, and pagination defaults.
"""

import os


class Config:
    """Application-wide configuration settings."""

    API_BASE_URL: str = os.getenv("ARENA_API_BASE_URL", "https://api.are.na/v2/")
    """Root of the Are.na REST API. All relative endpoint paths resolve against it.

    Can be overridden with ARENA_API_BASE_URL environment variable.
    Default: https://api.are.na/v2/
    """

    DEFAULT_TIMEOUT: float = float(os.getenv("ARENA_TIMEOUT", "10.0"))
    """Timeout in seconds applied by the default httpx transport.

    Can be overridden with ARENA_TIMEOUT environment variable.
    """

    ACCESS_TOKEN_ENV_VAR: str = "ARENA_ACCESS_TOKEN"
    """Environment variable the CLI reads the bearer token from."""

    DEFAULT_PER_PAGE: int = 50
    """Page size used when a caller does not pass `per`."""

    DEFAULT_SORT: str = "position"
    """Sort field used when a caller does not pass `sort`."""

    DEFAULT_DIRECTION: str = "desc"
    """Sort direction used when a caller does not pass `direction`."""
