"""Async client for the Are.na REST API."""

from arena_client.api.client import ArenaClient
from arena_client.api.errors import HttpError
from arena_client.api.pagination import PaginationAttributes
from arena_client.api.transport import Clock, HttpxTransport, SystemClock, Transport

__all__ = [
    "ArenaClient",
    "Clock",
    "HttpError",
    "HttpxTransport",
    "PaginationAttributes",
    "SystemClock",
    "Transport",
]
