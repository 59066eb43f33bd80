"""Shared utilities for arena_client."""

from arena_client.util.logging import setup_logging

__all__ = ["setup_logging"]
